"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern: configuration, content store, blueprints,
error handlers and the admin route guard are wired here. All route
handling is delegated to blueprints.
"""

import logging
import os

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from config import get_config
from extensions import init_content_store
from utils.errors import ApiError, ConfigurationError
from utils.session import finalize_response, guard_request

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.content import content_bp
from blueprints.dashboard import dashboard_bp
from blueprints.pages import pages_bp
from blueprints.uploads import uploads_bp


def create_app(config_name=None, overrides=None, store=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Config values applied after the config class (optional)
        store (ContentStore): Pre-built content store, mainly for tests (optional)

    Returns:
        Flask: Configured Flask application instance

    Raises:
        ConfigurationError: JWT_SECRET is not configured
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    validate_config(app)
    app.logger.setLevel(app.config.get('LOG_LEVEL', logging.INFO))

    # Content store (memory -> file -> optional KV)
    init_content_store(app, store=store)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def validate_config(app):
    """Fail fast on configuration the app cannot run without"""
    if not app.config.get('JWT_SECRET'):
        raise ConfigurationError(
            'JWT_SECRET is not set. Configure a signing secret before starting the app.')
    if not app.config.get('ADMIN_EMAIL') or not app.config.get('ADMIN_PASSWORD'):
        app.logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD not set - admin login is disabled")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(content_bp)
    app.register_blueprint(uploads_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(pages_bp)


def wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(ApiError)
    def api_error(e):
        if e.status_code >= 500:
            app.logger.error(f"API error on {request.path}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(413)
    def file_too_large(e):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        message = f'File is too large. Maximum request size is {limit_mb}MB.'
        if wants_json():
            return jsonify({'error': message}), 413
        return render_template('error.html', code=413, message=message), 413

    @app.errorhandler(HTTPException)
    def http_error(e):
        if wants_json():
            return jsonify({'error': e.description}), e.code
        return render_template('error.html', code=e.code, message=e.description), e.code

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('error.html', code=500, message='Internal server error'), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.before_request
    def before_request():
        """Admin route protection"""
        return guard_request()

    @app.after_request
    def after_request(response):
        """Session cookie cleanup and security headers"""
        response = finalize_response(response)
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        if app.config.get('SESSION_COOKIE_SECURE'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
