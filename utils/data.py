"""
Data Management Module - Section level access to the content document
Every section read goes through the section cache; every write is a
read-modify-write of the whole document through the content store.
"""

from flask import current_app

from .defaults import get_default_section
from .errors import ApiError


PERSISTENCE_HEADER = 'X-Content-Persistence'

SKILL_LEVELS = {
    'Expert': 95,
    'Advanced': 85,
    'Intermediate': 70,
    'Beginner': 50,
    'Novice': 30
}


def get_section_cache():
    return current_app.extensions['section_cache']


def load_section(name):
    """
    Load one section, falling back to its default shape when absent

    Args:
        name (str): Top-level section name, e.g. 'photos'

    Returns:
        The section value (dict, list or str)
    """
    value = get_section_cache().get(name)
    if value is None:
        current_app.logger.info(f"Section {name} not stored, returning default")
        return get_default_section(name)
    return value


def save_section(name, value):
    """
    Persist one section (dotted paths allowed)

    Returns:
        WriteResult: durability of the write

    Raises:
        ApiError: the in-memory update itself failed
    """
    result = get_section_cache().set(name, value)
    if result is None:
        raise ApiError(f'Failed to save {name}')
    return result


def with_persistence(response, result):
    """Expose the durability of a write on the response"""
    response.headers[PERSISTENCE_HEADER] = 'persisted' if result.persisted else 'cached-only'
    return response


def convert_level_to_number(level):
    """Convert textual skill levels (e.g. 'Expert') to a 0-100 number"""
    if isinstance(level, bool):
        return 50
    if isinstance(level, (int, float)):
        return level
    return SKILL_LEVELS.get(level, 50)


__all__ = [
    'PERSISTENCE_HEADER',
    'get_section_cache',
    'load_section',
    'save_section',
    'with_persistence',
    'convert_level_to_number'
]
