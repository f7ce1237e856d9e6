"""
Dashboard Blueprint - Admin panel pages
Handles: Dashboard overview; access is enforced by the route guard
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/admin')

from . import routes
