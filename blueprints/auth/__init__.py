"""
Auth Blueprint - Admin authentication
Handles: Login, Logout, Login page
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='')

from . import routes
