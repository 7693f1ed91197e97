"""
Auth Routes
"""

import logging

from flask import current_app, jsonify, request
from flask_login import current_user

from studio.auth import auth_bp
from studio.auth.decorators import login_required
from studio.schemas import LoginInput, validate_input
from studio.services import credentials, sessions

logger = logging.getLogger(__name__)


def _set_session_cookie(response, token):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        token,
        max_age=int(config['SESSION_TTL'].total_seconds()),
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite=config['AUTH_COOKIE_SAMESITE'],
    )


@auth_bp.route('/api/login', methods=['POST'])
def login():
    """Exchange username/password for a session cookie."""
    data = validate_input(LoginInput, request.get_json(silent=True))
    user = credentials.authenticate(data.username, data.password)

    token = sessions.create_session(user.id)
    logger.info('User %s logged in', user.username)

    response = jsonify(user.to_dict())
    _set_session_cookie(response, token)
    return response


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    """End the current session; calling it without one is harmless."""
    cookie_name = current_app.config['AUTH_COOKIE_NAME']
    sessions.destroy_session(request.cookies.get(cookie_name))

    response = jsonify({'message': 'Logged out successfully'})
    response.delete_cookie(cookie_name, httponly=True,
                           secure=current_app.config['AUTH_COOKIE_SECURE'],
                           samesite=current_app.config['AUTH_COOKIE_SAMESITE'])
    return response


@auth_bp.route('/api/auth/user')
@login_required
def get_current_user():
    return jsonify(current_user.to_dict())
