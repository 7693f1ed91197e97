"""
Studio CMS - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, current_app, request

from studio.config import Config
from studio.extensions import db, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.session_protection = None

    # Register blueprints
    from studio.auth import auth_bp
    from studio.public import public_bp
    from studio.admin import admin_bp
    from studio.media import media_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(public_bp)
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(media_bp, url_prefix='/api/media')

    from studio.errors import register_error_handlers
    from studio.cli import register_commands
    register_error_handlers(app)
    register_commands(app)

    @app.after_request
    def no_store_for_api(response):
        if request.path.startswith('/api'):
            response.headers.setdefault('Cache-Control', 'no-store')
        return response

    # Create database tables; accounts are provisioned via `flask create-admin`
    with app.app_context():
        db_uri = app.config['SQLALCHEMY_DATABASE_URI']
        if db_uri.startswith('sqlite:///') and ':memory:' not in db_uri:
            os.makedirs(os.path.dirname(db_uri[len('sqlite:///'):]), exist_ok=True)
        db.create_all()

    return app


@login_manager.request_loader
def load_user_from_request(req):
    """Users come from the server-side session named by the cookie."""
    from studio.services.sessions import resolve_session
    return resolve_session(req.cookies.get(current_app.config['AUTH_COOKIE_NAME']))
