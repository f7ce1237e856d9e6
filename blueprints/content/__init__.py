"""
Content Blueprint - JSON API over the site content document
Handles: hero, about, contact, settings, resume, photos, videos,
testimonials and blog sections
"""

from flask import Blueprint

content_bp = Blueprint('content', __name__, url_prefix='/api')

from . import routes
