"""
Pages Blueprint - Public portfolio pages
Handles: Home, Blog index, Blog posts
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
