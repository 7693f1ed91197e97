"""
Session Manager

Server-side sessions: a row per login, identified by an opaque random token
carried in an HTTP-only cookie. Expired rows are treated as absent and removed
when they are next looked up.
"""

import logging
import secrets

from flask import current_app

from studio.extensions import db
from studio.models import User, UserSession
from studio.models.base import utc_now_naive

logger = logging.getLogger(__name__)


def create_session(user_id):
    """Start a session for the user and return its token."""
    now = utc_now_naive()
    token = secrets.token_urlsafe(32)
    db.session.add(UserSession(
        id=token,
        user_id=user_id,
        created_at=now,
        expires_at=now + current_app.config['SESSION_TTL'],
    ))
    db.session.commit()
    return token


def resolve_session(token):
    """Return the active user behind a session token, or None."""
    if not token:
        return None

    record = db.session.get(UserSession, token)
    if record is None:
        return None

    if record.is_expired():
        logger.debug('Reaping expired session for user %s', record.user_id)
        db.session.delete(record)
        db.session.commit()
        return None

    user = db.session.get(User, record.user_id)
    if user is None or not user.is_active:
        return None
    return user


def destroy_session(token):
    """End a session; unknown or already-ended tokens are ignored."""
    if not token:
        return
    UserSession.query.filter_by(id=token).delete()
    db.session.commit()


def purge_expired():
    """Delete every expired session and return how many were removed."""
    removed = UserSession.query.filter(UserSession.expires_at <= utc_now_naive()).delete()
    db.session.commit()
    if removed:
        logger.info('Purged %d expired sessions', removed)
    return removed
