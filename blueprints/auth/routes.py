"""
Auth Routes - Admin login and logout
"""

from flask import current_app, jsonify, render_template, request
from utils.errors import AuthInvalid
from utils.security import get_client_ip, verify_admin_login
from utils.session import clear_session_cookie, set_session_cookie
from utils.tokens import issue_token
from . import auth_bp


@auth_bp.route('/api/auth/login', methods=['POST'])
def login():
    """Exchange admin credentials for a session cookie"""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({'success': False, 'message': 'Invalid request'}), 400

    email = body.get('email')
    password = body.get('password')
    client_ip = get_client_ip()

    if not verify_admin_login(email, password):
        current_app.logger.info(f"Failed admin login from {client_ip}")
        raise AuthInvalid('Invalid credentials')

    token = issue_token({'email': email}, current_app.config['JWT_SECRET'])
    response = jsonify({'success': True, 'message': 'Login successful'})
    set_session_cookie(response, token)
    current_app.logger.info(f"Admin login from {client_ip}")
    return response


@auth_bp.route('/api/auth/logout', methods=['POST'])
def logout():
    """Drop the session cookie"""
    response = jsonify({'success': True, 'message': 'Logged out'})
    clear_session_cookie(response)
    return response


@auth_bp.route('/admin/login')
def login_page():
    """Admin login form"""
    return render_template('admin/login.html')
