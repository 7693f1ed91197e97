"""
User and Session Models
"""

import enum

from flask_login import UserMixin

from studio.extensions import db
from studio.models.base import SerializerMixin, utc_now_naive


class Role(str, enum.Enum):
    """Closed set of staff roles."""
    ADMIN = 'admin'
    EDITOR = 'editor'
    VIEWER = 'viewer'


class User(UserMixin, SerializerMixin, db.Model):
    """Staff account used to sign in to the admin API"""
    __tablename__ = 'users'
    __hidden_fields__ = ('password_hash',)

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True)
    first_name = db.Column(db.String(120))
    last_name = db.Column(db.String(120))
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(Role, name='user_role', values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.VIEWER,
    )
    # Overrides UserMixin.is_active
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive, onupdate=utc_now_naive)

    sessions = db.relationship('UserSession', backref='user', lazy=True, passive_deletes=True)

    def __repr__(self):
        return f'<User {self.username} ({self.role.value})>'


class UserSession(db.Model):
    """Server-side login session keyed by the opaque cookie token"""
    __tablename__ = 'sessions'

    id = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    def is_expired(self, now=None):
        return self.expires_at <= (now or utc_now_naive())

    def __repr__(self):
        return f'<UserSession user:{self.user_id} expires:{self.expires_at}>'
