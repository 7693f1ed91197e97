import pytest

from studio import create_app
from studio.config import TestConfig
from studio.extensions import db
from studio.models import Role
from studio.services import credentials

PASSWORD = 'correct-horse-battery'


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(Config)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def ctx(app):
    """Application context for calling services directly."""
    with app.app_context():
        yield app


@pytest.fixture()
def users(app):
    """One account per role; returns username -> id."""
    with app.app_context():
        created = {}
        for role in Role:
            user = credentials.create_user(f'{role.value}user', PASSWORD, role=role)
            created[role.value] = user.id
        return created


def _login(app, username):
    client = app.test_client()
    r = client.post('/api/login', json={'username': username, 'password': PASSWORD})
    assert r.status_code == 200, r.get_json()
    return client


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app, users):
    return _login(app, 'adminuser')


@pytest.fixture()
def editor_client(app, users):
    return _login(app, 'editoruser')


@pytest.fixture()
def viewer_client(app, users):
    return _login(app, 'vieweruser')
