"""
Public Blueprint

Unauthenticated read endpoints for the marketing site and the contact form.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from studio.public import routes  # noqa: E402, F401
