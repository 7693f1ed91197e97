"""
Auth Blueprint

Login, logout and current-user endpoints backed by server-side sessions.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from studio.auth import routes  # noqa: E402, F401
