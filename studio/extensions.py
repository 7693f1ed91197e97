"""
Flask Extensions

Sessions are stored server-side in the ``sessions`` table and resolved from
an HTTP-only cookie on every request through Flask-Login's request loader.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Database instance
db = SQLAlchemy()

# Login manager; users are loaded from the session cookie, never from the
# Flask cookie session
login_manager = LoginManager()


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on FK enforcement so ON DELETE CASCADE / SET NULL apply on SQLite."""
    if type(dbapi_connection).__module__.startswith('sqlite3'):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON;')
        cursor.close()
