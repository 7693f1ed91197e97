"""
Route decorators enforcing the authorization gate.
"""

from functools import wraps

from flask_login import current_user

from studio.auth.gate import AccessLevel, DenyReason, authorize
from studio.errors import Forbidden, Unauthenticated


def require(level):
    """Decorator to ensure the current user satisfies ``level``.

    Raises Unauthenticated (401) when no valid session is present and
    Forbidden (403) when the user's role is insufficient.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            decision = authorize(current_user, level)
            if not decision.allowed:
                if decision.reason is DenyReason.FORBIDDEN:
                    raise Forbidden()
                raise Unauthenticated()
            return f(*args, **kwargs)
        wrapper.access_level = level
        return wrapper
    return decorator


login_required = require(AccessLevel.AUTHENTICATED)
editor_required = require(AccessLevel.EDITOR)
admin_required = require(AccessLevel.ADMIN)
