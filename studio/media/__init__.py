"""
Media Blueprint

Image uploads and the media library used by the admin picker.
"""

from flask import Blueprint

media_bp = Blueprint('media', __name__)

from studio.media import routes  # noqa: E402, F401
