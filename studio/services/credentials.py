"""
Credential Store

Looks up staff accounts and verifies passwords with werkzeug's salted,
adaptive hashes.
"""

import logging

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

from studio.errors import ConflictError, InvalidCredentials, NotFound, ValidationError, guarded
from studio.extensions import db
from studio.models import Role, User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

_dummy_hashes = {}


def hash_password(plain):
    return generate_password_hash(plain, method=current_app.config['PASSWORD_HASH_METHOD'])


def verify_password(plain, password_hash):
    if not password_hash:
        return False
    return check_password_hash(password_hash, plain)


def _dummy_hash():
    # One throwaway hash per method so unknown usernames cost a full check
    method = current_app.config['PASSWORD_HASH_METHOD']
    if method not in _dummy_hashes:
        _dummy_hashes[method] = generate_password_hash('not-a-real-password', method=method)
    return _dummy_hashes[method]


def find_user_by_username(username):
    if not username:
        return None
    return User.query.filter_by(username=username).first()


def authenticate(username, password):
    """Return the active user for these credentials or raise InvalidCredentials.

    An unknown username, a wrong password and a disabled account all raise the
    same error, and an unknown username still pays for a hash check.
    """
    user = find_user_by_username(username)
    if user is None:
        verify_password(password, _dummy_hash())
        logger.warning('Failed login for unknown username')
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash) or not user.is_active:
        logger.warning('Failed login for user id %s', user.id)
        raise InvalidCredentials()

    return user


def create_user(username, password, role=Role.VIEWER, email=None, first_name=None, last_name=None):
    username = (username or '').strip()
    if len(username) < 3:
        raise ValidationError('Username must be at least 3 characters long.')
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long.')
    if find_user_by_username(username):
        raise ConflictError(f'Username "{username}" is already taken.')
    if email and User.query.filter_by(email=email).first():
        raise ConflictError(f'Email "{email}" is already registered.')

    user = User(
        username=username,
        email=email,
        first_name=first_name,
        last_name=last_name,
        password_hash=hash_password(password),
        role=Role(role),
    )
    with guarded(f'creating user {username}'):
        db.session.add(user)
        db.session.commit()
    logger.info('Created %s account %s', user.role.value, username)
    return user


def set_role(user_id, role):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound('User not found.')
    user.role = Role(role)
    with guarded(f'updating role of user {user_id}'):
        db.session.commit()
    logger.info('User %s role set to %s', user.username, user.role.value)
    return user


def provision_admin(username, password):
    """Create the admin account, or make sure the existing one is an active admin.

    Safe to run repeatedly; returns (user, created).
    """
    user = find_user_by_username(username)
    if user is None:
        return create_user(username, password, role=Role.ADMIN), True

    user.role = Role.ADMIN
    user.is_active = True
    with guarded(f'restoring admin {username}'):
        db.session.commit()
    logger.info('Admin account %s already present', username)
    return user, False


def list_users():
    return User.query.order_by(User.username).all()
