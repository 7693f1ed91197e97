"""
Admin Blueprint

Content management API for staff. Reads and writes need the editor level,
deletes and user management need the admin level.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from studio.admin import routes  # noqa: E402, F401
