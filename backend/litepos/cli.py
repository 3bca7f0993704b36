# Overview: Flask CLI commands for bootstrapping and inspecting the POS database.

# backend/litepos/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Use: flask --app litepos <group> <command> [options]
#
# - flask --app litepos pos init-db
#   Create missing tables and seed default settings (idempotent).
# - flask --app litepos pos reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - flask --app litepos pos create-user --name "Alice" --pin 1234 --role admin
#   Create a user; the PIN is hashed before it is stored.
# - flask --app litepos pos users
#   List users that are not deleted.

import click
from flask import current_app
from flask.cli import with_appcontext

from .extensions import db
from .models import USER_ROLES
from .services import auth_service, settings_service


@click.group('pos')
def pos_group():
    """POS database bootstrap commands."""


@pos_group.command('init-db')
@with_appcontext
def init_db():
    """Create tables and seed default settings."""
    db.create_all()
    inserted = settings_service.seed_default_settings()
    current_app.logger.info("Database initialized, %d default settings inserted", inserted)
    click.echo(f"PASS Database ready ({inserted} default settings inserted)")


@pos_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()
    settings_service.seed_default_settings()

    click.echo("PASS Database reset complete.")


@pos_group.command('create-user')
@click.option('--name', prompt=True, help='Display name')
@click.option('--pin', prompt=True, hide_input=True, confirmation_prompt=True, help='Numeric login PIN')
@click.option('--role', type=click.Choice(USER_ROLES), default='cashier', show_default=True)
@click.option('--email', default=None, help='Optional email')
@with_appcontext
def create_user(name, pin, role, email):
    """Create a POS user."""
    if not pin.isdigit():
        raise click.BadParameter("PIN must be digits only", param_hint="--pin")

    pin_hash = auth_service.hash_pin(pin)
    if auth_service.login(pin_hash) is not None:
        raise click.ClickException("Another active user already has this PIN")

    user_id = auth_service.create_user(name=name, pin_hash=pin_hash, role=role, email=email)
    click.echo(f"PASS Created user {name} (ID: {user_id}, role: {role})")


@pos_group.command('users')
@with_appcontext
def list_users():
    """List users."""
    users = auth_service.list_users()
    if not users:
        click.echo("No users found.")
        return
    for u in users:
        status = "active" if u["is_active"] else "inactive"
        click.echo(f"{u['id']:>4}  {u['name']:<24} {u['role']:<8} {status}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(pos_group)
