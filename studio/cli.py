"""CLI tools for Studio CMS administration.

Provisioning runs once per deployment through these commands instead of on
every process start:

    flask --app app init-db
    flask --app app create-admin --username admin
    flask --app app create-user jane --role editor
    flask --app app purge-sessions
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from studio.errors import StudioError
from studio.extensions import db
from studio.models import Role
from studio.services import credentials, sessions


@click.command('init-db')
@with_appcontext
def init_db():
    """Create all database tables."""
    db.create_all()
    click.echo('Database tables created.')


@click.command('create-admin')
@with_appcontext
@click.option('--username', default=None, help='Admin username (defaults to ADMIN_USERNAME)')
@click.option('--password', default=None, help='Admin password (defaults to ADMIN_PASSWORD)')
def create_admin(username, password):
    """Create the admin account, or restore admin rights if it already exists."""
    username = username or current_app.config['ADMIN_USERNAME']
    password = password or current_app.config['ADMIN_PASSWORD']
    existing = credentials.find_user_by_username(username)
    if existing is None and not password:
        password = click.prompt('Admin password', hide_input=True, confirmation_prompt=True)

    try:
        user, created = credentials.provision_admin(username, password)
    except StudioError as e:
        raise click.ClickException(e.message)

    if created:
        click.echo(f'Admin user created: {user.username}')
    else:
        click.echo(f'Admin user already exists: {user.username}')


@click.command('create-user')
@with_appcontext
@click.argument('username')
@click.option('--role', type=click.Choice([r.value for r in Role]), default=Role.EDITOR.value,
              show_default=True)
@click.option('--email', default=None)
@click.password_option()
def create_user(username, role, email, password):
    """Create a staff account."""
    try:
        user = credentials.create_user(username, password, role=Role(role), email=email)
    except StudioError as e:
        raise click.ClickException(e.message)
    click.echo(f'Created {user.role.value} user: {user.username}')


@click.command('purge-sessions')
@with_appcontext
def purge_sessions():
    """Delete expired login sessions."""
    removed = sessions.purge_expired()
    click.echo(f'Removed {removed} expired session(s).')


def register_commands(app):
    for command in (init_db, create_admin, create_user, purge_sessions):
        app.cli.add_command(command)
