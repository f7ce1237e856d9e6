"""
Uploads Blueprint - Media uploads for photos and videos
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__, url_prefix='')

from . import routes
