"""
Configuration settings for the Studio CMS backend
"""
import os
import tempfile
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Flask secret key
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'studio.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions
    SESSION_TTL = timedelta(days=int(os.environ.get('SESSION_TTL_DAYS', 7)))
    AUTH_COOKIE_NAME = os.environ.get('AUTH_COOKIE_NAME') or 'studio_session'
    AUTH_COOKIE_SECURE = os.environ.get('AUTH_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    AUTH_COOKIE_SAMESITE = 'Lax'
    # Never issued; keeps Flask-Login on the request loader
    REMEMBER_COOKIE_NAME = 'studio_remember_unused'

    # scrypt with n=2**15 (log2 cost 15)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'scrypt:32768:8:1'

    # Media uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'instance', 'uploads')
    MAX_UPLOAD_BYTES = 10 * 1024 * 1024
    # Whole request body, multipart overhead included
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024
    ALLOWED_UPLOAD_MIMETYPES = (
        'image/jpeg',
        'image/png',
        'image/gif',
        'image/webp',
        'image/svg+xml',
    )

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Provisioning defaults for `flask create-admin` (never applied at startup)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), 'studio-test-uploads')
    LOG_LEVEL = 'WARNING'
