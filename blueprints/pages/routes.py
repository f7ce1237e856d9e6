"""
Pages Routes - Public portfolio pages rendered from the content document
"""

from flask import abort, render_template
from utils.data import load_section
from utils.defaults import SECTIONS
from . import pages_bp


@pages_bp.route('/')
def index():
    """Portfolio home page"""
    content = {name: load_section(name) for name in SECTIONS}
    return render_template('index.html', content=content)


@pages_bp.route('/blog')
def blog():
    """Blog index, newest first"""
    posts = sorted(load_section('blog'), key=lambda p: str(p.get('date', '')), reverse=True)
    return render_template('blog.html', posts=posts, settings=load_section('settings'))


@pages_bp.route('/blog/<post_id>')
def blog_post(post_id):
    """Single blog post"""
    post = next((p for p in load_section('blog') if str(p.get('id')) == post_id), None)
    if not post:
        abort(404)
    return render_template('blog_post.html', post=post, settings=load_section('settings'))
