"""
Defaults Module - Default shape of every content section
Returned whenever a section is missing so API consumers never see null.
"""

import copy


DEFAULT_ABOUT_STATS = [
    {'icon': 'Briefcase', 'value': '12+', 'label': 'Years Experience'},
    {'icon': 'DollarSign', 'value': '$5M+', 'label': 'Revenue Generated'},
    {'icon': 'Users', 'value': '20+', 'label': 'Team Members Led'},
    {'icon': 'Award', 'value': '100+', 'label': 'Projects Completed'}
]

_DEFAULT_SECTIONS = {
    'hero': {
        'name': 'Your Name',
        'titles': ['Executive Producer', 'HR Manager', 'Sales Manager', 'Marketing Manager'],
        'description': 'Media professional with experience in production, marketing, and team leadership.',
        'profileImage': ''
    },
    'photos': [],
    'videos': [],
    'about': {
        'title': 'About Me',
        'profileImage': '',
        'content': '',
        'stats': DEFAULT_ABOUT_STATS
    },
    'resume': {
        'experience': [],
        'aboutMe': '',
        'skills': []
    },
    'testimonials': [],
    'contact': {
        'email': '',
        'phone': '',
        'location': '',
        'linkedin': '',
        'socialLinks': {
            'twitter': '',
            'instagram': '',
            'facebook': ''
        }
    },
    'settings': {
        'name': 'Your Name',
        'title': '',
        'email': '',
        'phone': '',
        'linkedin': '',
        'profilePhoto': ''
    },
    'blog': []
}

SECTIONS = tuple(_DEFAULT_SECTIONS)
RESUME_SECTIONS = ('experience', 'aboutMe', 'skills')


def get_default_document():
    """Return a fresh copy of the full default content document"""
    return copy.deepcopy(_DEFAULT_SECTIONS)


def get_default_section(name):
    """Return a fresh copy of one section's default value"""
    if name not in _DEFAULT_SECTIONS:
        raise KeyError(f'Unknown section: {name}')
    return copy.deepcopy(_DEFAULT_SECTIONS[name])


__all__ = [
    'DEFAULT_ABOUT_STATS',
    'SECTIONS',
    'RESUME_SECTIONS',
    'get_default_document',
    'get_default_section'
]
