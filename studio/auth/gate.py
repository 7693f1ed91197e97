"""
Authorization Gate

Pure role check: given the requesting user (or None) and the level a route
requires, decide whether the request may proceed.
"""

import enum
from typing import NamedTuple, Optional

from studio.models.user import Role


class AccessLevel(enum.Enum):
    PUBLIC = 'public'
    AUTHENTICATED = 'authenticated'
    EDITOR = 'editor'
    ADMIN = 'admin'


class DenyReason(enum.Enum):
    UNAUTHENTICATED = 'unauthenticated'
    FORBIDDEN = 'forbidden'


class Decision(NamedTuple):
    allowed: bool
    reason: Optional[DenyReason] = None


ALLOW = Decision(True)

# Levels each role satisfies; every Role must appear here
_GRANTS = {
    Role.ADMIN: frozenset({AccessLevel.AUTHENTICATED, AccessLevel.EDITOR, AccessLevel.ADMIN}),
    Role.EDITOR: frozenset({AccessLevel.AUTHENTICATED, AccessLevel.EDITOR}),
    Role.VIEWER: frozenset({AccessLevel.AUTHENTICATED}),
}


def _signed_in(user):
    if user is None or not getattr(user, 'is_authenticated', False):
        return False
    return bool(getattr(user, 'is_active', False))


def authorize(user, level):
    """Return ALLOW or a denying Decision carrying UNAUTHENTICATED / FORBIDDEN."""
    if level is AccessLevel.PUBLIC:
        return ALLOW
    if not _signed_in(user):
        return Decision(False, DenyReason.UNAUTHENTICATED)
    if level in _GRANTS[Role(user.role)]:
        return ALLOW
    return Decision(False, DenyReason.FORBIDDEN)
