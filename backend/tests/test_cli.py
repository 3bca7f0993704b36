# Overview: Pytest coverage for the pos CLI group.

import pytest

from litepos import create_app
from litepos.config import TestConfig
from litepos.services import auth_service, settings_service


@pytest.fixture
def cli_app(tmp_path):
    """App on a throwaway file database, with its context active while commands run."""

    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'cli.db'}"

    app = create_app(FileConfig)
    with app.app_context():
        yield app


@pytest.fixture
def runner(cli_app):
    return cli_app.test_cli_runner()


class TestInitDb:
    """init-db creates tables and seeds settings once."""

    def test_init_then_rerun(self, runner, cli_app):
        result = runner.invoke(args=["pos", "init-db"])
        assert result.exit_code == 0, result.output
        assert "PASS Database ready (8 default settings inserted)" in result.output

        result = runner.invoke(args=["pos", "init-db"])
        assert "(0 default settings inserted)" in result.output

        with cli_app.app_context():
            assert settings_service.get_setting("order_number_prefix")["value"] == "ORD-"

    def test_reset_requires_confirmation(self, runner):
        runner.invoke(args=["pos", "init-db"])
        result = runner.invoke(args=["pos", "reset-db"], input="n\n")
        assert result.exit_code != 0

    def test_reset_with_yes_wipes_data(self, runner, cli_app):
        runner.invoke(args=["pos", "init-db"])
        runner.invoke(args=["pos", "create-user", "--name", "Casey", "--pin", "1234"])

        result = runner.invoke(args=["pos", "reset-db", "--yes"])
        assert result.exit_code == 0, result.output
        assert "PASS Database reset complete." in result.output

        with cli_app.app_context():
            assert auth_service.list_users() == []
            assert len(settings_service.list_settings()) == 8


class TestUserCommands:
    """create-user and users."""

    def test_create_user_hashes_pin(self, runner, cli_app):
        runner.invoke(args=["pos", "init-db"])
        result = runner.invoke(
            args=["pos", "create-user", "--name", "Ada", "--pin", "9999", "--role", "admin"],
        )
        assert result.exit_code == 0, result.output
        assert "PASS Created user Ada" in result.output

        with cli_app.app_context():
            user = auth_service.login(auth_service.hash_pin("9999"))
            assert user["name"] == "Ada"
            assert user["role"] == "admin"
            assert user["pin_hash"] != "9999"

    def test_rejects_non_numeric_pin(self, runner):
        runner.invoke(args=["pos", "init-db"])
        result = runner.invoke(args=["pos", "create-user", "--name", "Bo", "--pin", "12ab"])
        assert result.exit_code == 2
        assert "PIN must be digits only" in result.output

    def test_rejects_duplicate_pin(self, runner):
        runner.invoke(args=["pos", "init-db"])
        runner.invoke(args=["pos", "create-user", "--name", "Casey", "--pin", "1234"])
        result = runner.invoke(args=["pos", "create-user", "--name", "Sam", "--pin", "1234"])
        assert result.exit_code == 1
        assert "Another active user already has this PIN" in result.output

    def test_rejects_unknown_role(self, runner):
        runner.invoke(args=["pos", "init-db"])
        result = runner.invoke(
            args=["pos", "create-user", "--name", "Bo", "--pin", "1111", "--role", "owner"],
        )
        assert result.exit_code == 2

    def test_users_listing(self, runner):
        runner.invoke(args=["pos", "init-db"])
        assert "No users found." in runner.invoke(args=["pos", "users"]).output

        runner.invoke(args=["pos", "create-user", "--name", "Casey Cashier", "--pin", "1234"])
        output = runner.invoke(args=["pos", "users"]).output
        assert "Casey Cashier" in output
        assert "cashier" in output
        assert "active" in output
