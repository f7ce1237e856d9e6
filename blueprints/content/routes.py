"""
Content Routes - Read and write endpoints for every content section
List items are addressed with ?index= (photos, videos, testimonials)
or ?id= (blog) query parameters.
"""

import time

from flask import current_app, jsonify, request
from utils.data import (
    convert_level_to_number,
    load_section,
    save_section,
    with_persistence
)
from utils.decorators import admin_required
from utils.defaults import RESUME_SECTIONS, get_default_section
from utils.errors import NotFound, ValidationError
from utils.helpers import parse_index
from . import content_bp


def get_json_body(expected=dict):
    """Parsed JSON request body, required to be of the expected type"""
    body = request.get_json(silent=True)
    if not isinstance(body, expected):
        raise ValidationError('Request body must be a JSON ' + ('object' if expected is dict else 'value'))
    return body


def load_list(name):
    items = load_section(name)
    return items if isinstance(items, list) else []


# ---------------------------------------------------------------------------
# Hero
# ---------------------------------------------------------------------------

@content_bp.route('/hero', methods=['GET'])
def get_hero():
    """Hero section, served through the section cache"""
    return jsonify(load_section('hero'))


@content_bp.route('/hero', methods=['POST'])
@admin_required
def update_hero():
    """Replace the hero section"""
    hero = get_json_body()
    if not hero.get('name') or hero.get('titles') is None or not hero.get('description'):
        raise ValidationError('Missing required fields',
                              details='Name, titles, and description are required')

    result = save_section('hero', hero)
    current_app.logger.info(f"Hero section updated ({result.status})")
    response = jsonify({
        'success': True,
        'data': hero,
        'message': 'Hero data updated successfully'
    })
    return with_persistence(response, result)


# ---------------------------------------------------------------------------
# About / Contact
# ---------------------------------------------------------------------------

@content_bp.route('/about', methods=['GET'])
def get_about():
    return jsonify(load_section('about'))


@content_bp.route('/about', methods=['POST'])
@admin_required
def update_about():
    about = get_json_body()
    result = save_section('about', about)
    return with_persistence(jsonify(about), result), 201


@content_bp.route('/contact', methods=['GET'])
def get_contact():
    return jsonify(load_section('contact'))


@content_bp.route('/contact', methods=['POST'])
@admin_required
def update_contact():
    contact = get_json_body()
    result = save_section('contact', contact)
    return with_persistence(jsonify(contact), result), 201


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@content_bp.route('/settings', methods=['GET'])
def get_settings():
    return jsonify(load_section('settings'))


@content_bp.route('/settings', methods=['PUT'])
@admin_required
def update_settings():
    """Merge the submitted fields into the stored settings"""
    updates = get_json_body()
    settings = load_section('settings')
    if not isinstance(settings, dict):
        current_app.logger.warning("Stored settings are not an object, starting from defaults")
        settings = get_default_section('settings')
    settings.update(updates)
    result = save_section('settings', settings)
    return with_persistence(jsonify({'success': True}), result)


# ---------------------------------------------------------------------------
# Resume
# ---------------------------------------------------------------------------

def load_resume():
    resume = load_section('resume')
    if not isinstance(resume, dict):
        resume = {}
    defaults = get_default_section('resume')
    for key in RESUME_SECTIONS:
        if resume.get(key) is None:
            resume[key] = defaults[key]
    if isinstance(resume['skills'], list):
        resume['skills'] = [
            dict(skill, level=convert_level_to_number(skill.get('level')))
            if isinstance(skill, dict) else skill
            for skill in resume['skills']
        ]
    return resume


def validate_resume_items(section, items):
    expected = str if section == 'aboutMe' else list
    if not isinstance(items, expected):
        raise ValidationError(f'{section} must be a ' + ('string' if expected is str else 'list'))
    return items


def validate_resume_section(section):
    if not section or section not in RESUME_SECTIONS:
        raise ValidationError('Invalid section')
    return section


@content_bp.route('/resume', methods=['GET'])
def get_resume():
    """Whole resume, or one sub-section with ?section="""
    resume = load_resume()
    section = request.args.get('section')
    if section is not None:
        validate_resume_section(section)
        return jsonify(resume[section])
    return jsonify(resume)


@content_bp.route('/resume', methods=['POST'])
@admin_required
def add_resume_item():
    """
    Body: {section, item | content | data}
    aboutMe takes `content`; list sections take `data` (replace) or `item` (append)
    """
    body = get_json_body()
    section = validate_resume_section(body.get('section'))

    if section == 'aboutMe':
        content = body.get('content', '')
        result = save_section('resume.aboutMe', content)
        return with_persistence(jsonify({'content': content}), result), 201

    resume = load_resume()
    if body.get('data') is not None:
        items = validate_resume_items(section, body['data'])
        payload = items
    elif body.get('item') is not None:
        items = list(resume[section]) if isinstance(resume[section], list) else []
        items.append(body['item'])
        payload = body['item']
    else:
        raise ValidationError('One of item, content or data is required')

    result = save_section(f'resume.{section}', items)
    return with_persistence(jsonify(payload), result), 201


@content_bp.route('/resume', methods=['PUT'])
@admin_required
def replace_resume_section():
    """Body: {section, items} replaces a resume sub-section"""
    body = get_json_body()
    section = validate_resume_section(body.get('section'))
    if 'items' not in body:
        raise ValidationError('Items are required')
    items = validate_resume_items(section, body['items'])
    result = save_section(f'resume.{section}', items)
    return with_persistence(jsonify({'success': True}), result)


# ---------------------------------------------------------------------------
# Index-addressed lists: photos, videos, testimonials
# ---------------------------------------------------------------------------

def register_list_section(name, label):
    """Register GET/POST/PUT/DELETE routes for a list section addressed by ?index="""

    def list_items():
        return jsonify(load_list(name))

    @admin_required
    def add_item():
        item = get_json_body()
        items = load_list(name)
        items.append(item)
        result = save_section(name, items)
        current_app.logger.info(f"Added {label} #{len(items) - 1}")
        return with_persistence(jsonify(item), result), 201

    @admin_required
    def update_item():
        items = load_list(name)
        index = parse_index(request.args.get('index'), items)
        item = get_json_body()
        items[index] = item
        result = save_section(name, items)
        return with_persistence(jsonify(item), result)

    @admin_required
    def delete_item():
        items = load_list(name)
        index = parse_index(request.args.get('index'), items)
        del items[index]
        result = save_section(name, items)
        current_app.logger.info(f"Deleted {label} #{index}")
        return with_persistence(jsonify({'success': True}), result)

    rule = f'/{name}'
    content_bp.add_url_rule(rule, f'list_{name}', list_items, methods=['GET'])
    content_bp.add_url_rule(rule, f'add_{name}', add_item, methods=['POST'])
    content_bp.add_url_rule(rule, f'update_{name}', update_item, methods=['PUT'])
    content_bp.add_url_rule(rule, f'delete_{name}', delete_item, methods=['DELETE'])


register_list_section('photos', 'photo')
register_list_section('videos', 'video')
register_list_section('testimonials', 'testimonial')


# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------

def generate_post_id(posts):
    """Millisecond timestamp id, bumped past any id already in use"""
    taken = {str(post.get('id')) for post in posts if isinstance(post, dict)}
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def find_post(posts, post_id):
    if post_id is None or post_id == '':
        raise ValidationError('ID is required')
    for index, post in enumerate(posts):
        if isinstance(post, dict) and str(post.get('id')) == post_id:
            return index
    raise NotFound('Post not found')


@content_bp.route('/blog', methods=['GET'])
def list_posts():
    return jsonify(load_list('blog'))


@content_bp.route('/blog/<post_id>', methods=['GET'])
def get_post(post_id):
    posts = load_list('blog')
    return jsonify(posts[find_post(posts, post_id)])


@content_bp.route('/blog', methods=['POST'])
@admin_required
def add_post():
    body = get_json_body()
    posts = load_list('blog')
    post = dict(body)
    post['id'] = generate_post_id(posts)
    posts.append(post)
    result = save_section('blog', posts)
    current_app.logger.info(f"Created blog post {post['id']}")
    return with_persistence(jsonify(post), result), 201


@content_bp.route('/blog', methods=['PUT'])
@admin_required
def update_post():
    post_id = request.args.get('id')
    posts = load_list('blog')
    index = find_post(posts, post_id)
    post = dict(get_json_body())
    post['id'] = post_id
    posts[index] = post
    result = save_section('blog', posts)
    return with_persistence(jsonify(post), result)


@content_bp.route('/blog', methods=['DELETE'])
@admin_required
def delete_post():
    post_id = request.args.get('id')
    posts = load_list('blog')
    index = find_post(posts, post_id)
    del posts[index]
    result = save_section('blog', posts)
    current_app.logger.info(f"Deleted blog post {post_id}")
    return with_persistence(jsonify({'success': True}), result)
