"""
Helpers Module - Utility functions for common operations
"""

import os
import re
import time

from flask import current_app
from werkzeug.utils import secure_filename

from .errors import NotFound, ValidationError


def classify_upload(mimetype):
    """Return 'image', 'video' or None for an uploaded file's MIME type"""
    if mimetype in current_app.config['ALLOWED_IMAGE_TYPES']:
        return 'image'
    if mimetype in current_app.config['ALLOWED_VIDEO_TYPES']:
        return 'video'
    return None


def get_file_size(file_storage):
    """Size in bytes of an uploaded file, leaving the stream at the start"""
    stream = file_storage.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_upload(file_storage):
    """
    Check an uploaded file against the type allow-lists and size limits

    Returns:
        str: 'image' or 'video'

    Raises:
        ValidationError: no file, disallowed type, or too large
    """
    if file_storage is None or not file_storage.filename:
        raise ValidationError('No file provided')

    kind = classify_upload(file_storage.mimetype)
    if kind is None:
        raise ValidationError('Invalid file type. Only images and videos are allowed.')

    if kind == 'video':
        max_size, limit = current_app.config['MAX_VIDEO_SIZE'], '50MB'
    else:
        max_size, limit = current_app.config['MAX_IMAGE_SIZE'], '5MB'
    if get_file_size(file_storage) > max_size:
        raise ValidationError(f'File size exceeds {limit} limit')
    return kind


def build_upload_filename(original_name):
    """Timestamp-prefixed, filesystem-safe name for an upload"""
    name = re.sub(r'\s+', '-', original_name or '')
    name = secure_filename(name) or 'upload'
    return f"{int(time.time() * 1000)}-{name}"


def parse_index(raw_index, items):
    """
    Resolve the ?index= query parameter against a list

    Raises:
        ValidationError: index missing or not an integer
        NotFound: index outside the list
    """
    if raw_index is None or raw_index == '':
        raise ValidationError('Index is required')
    try:
        index = int(raw_index)
    except (TypeError, ValueError):
        raise ValidationError('Index must be an integer')
    if index < 0 or index >= len(items):
        raise NotFound(f'No item at index {index}')
    return index


__all__ = [
    'classify_upload',
    'get_file_size',
    'validate_upload',
    'build_upload_filename',
    'parse_index'
]
