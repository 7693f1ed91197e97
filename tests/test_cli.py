from datetime import timedelta

from studio.extensions import db
from studio.models import Role, User, UserSession
from studio.models.base import utc_now_naive
from studio.services import credentials, sessions


def test_create_admin_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=['create-admin', '--username', 'owner', '--password', 'long-enough-pw'])
    assert result.exit_code == 0, result.output
    assert 'Admin user created: owner' in result.output

    result = runner.invoke(args=['create-admin', '--username', 'owner', '--password', 'long-enough-pw'])
    assert result.exit_code == 0, result.output
    assert 'already exists' in result.output

    with app.app_context():
        assert User.query.filter_by(username='owner').count() == 1


def test_create_admin_restores_admin_role(app):
    with app.app_context():
        credentials.create_user('owner', 'long-enough-pw', role=Role.VIEWER)

    result = app.test_cli_runner().invoke(args=['create-admin', '--username', 'owner'])
    assert result.exit_code == 0, result.output

    with app.app_context():
        assert User.query.filter_by(username='owner').one().role is Role.ADMIN


def test_create_admin_rejects_short_password(app):
    result = app.test_cli_runner().invoke(
        args=['create-admin', '--username', 'owner', '--password', 'short'])
    assert result.exit_code != 0
    assert 'at least 8 characters' in result.output


def test_create_user(app):
    result = app.test_cli_runner().invoke(
        args=['create-user', 'jane', '--role', 'editor', '--email', 'jane@x.com'],
        input='long-enough-pw\nlong-enough-pw\n',
    )
    assert result.exit_code == 0, result.output
    with app.app_context():
        user = User.query.filter_by(username='jane').one()
        assert user.role is Role.EDITOR
        assert credentials.verify_password('long-enough-pw', user.password_hash)


def test_purge_sessions(app, users):
    with app.app_context():
        live = sessions.create_session(users['admin'])
        stale = db.session.get(UserSession, sessions.create_session(users['editor']))
        stale.expires_at = utc_now_naive() - timedelta(minutes=1)
        db.session.commit()

    result = app.test_cli_runner().invoke(args=['purge-sessions'])
    assert result.exit_code == 0, result.output
    assert 'Removed 1 expired session(s).' in result.output

    with app.app_context():
        assert [s.id for s in UserSession.query.all()] == [live]


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'Database tables created.' in result.output


def test_create_user_rejects_duplicate_email(app):
    runner = app.test_cli_runner()
    first = runner.invoke(args=['create-user', 'jane', '--email', 'j@x.com'],
                          input='long-enough-pw\nlong-enough-pw\n')
    assert first.exit_code == 0, first.output

    second = runner.invoke(args=['create-user', 'joan', '--email', 'j@x.com'],
                           input='long-enough-pw\nlong-enough-pw\n')
    assert second.exit_code == 1
    assert isinstance(second.exception, SystemExit)
    assert 'already registered' in second.output

    with app.app_context():
        assert User.query.filter_by(username='joan').first() is None
