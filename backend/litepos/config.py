# backend/litepos/config.py
from __future__ import annotations
import os


class Config:
    # Key for the deterministic PIN hash; login looks users up by hash equality
    PIN_HASH_KEY = os.environ.get("PIN_HASH_KEY", "dev-pin-key-change-me")

    # SQLite DB stored next to the instance as lite-pos.db
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///lite-pos.db", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logged statements are truncated to this many characters
    SQL_LOG_MAX_CHARS = int(os.environ.get("SQL_LOG_MAX_CHARS", "200"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    PIN_HASH_KEY = "test-pin-key"
