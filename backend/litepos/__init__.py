# backend/litepos/__init__.py
from flask import Flask

from .config import Config
from .extensions import db, migrate
from .state import PosState


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    # Process-local register state (cart, session, filters, settings snapshot)
    app.extensions["pos_state"] = PosState()

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    return app
