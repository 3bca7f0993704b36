"""
Pytest fixtures for LitePOS backend tests.

Provides the test app on in-memory SQLite, a per-test table wipe, and
small factories for the rows most tests need.
"""

import pytest

from litepos import create_app
from litepos.config import TestConfig
from litepos.extensions import db
from litepos.services import auth_service, category_service, product_service, settings_service


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def db_session(app):
    """Create fresh database for each test."""
    with app.app_context():
        # Clear all data but keep schema
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        # Cleanup after test
        db.session.rollback()


@pytest.fixture(scope='function')
def default_settings(db_session):
    """Seed the default settings rows."""
    settings_service.seed_default_settings()


@pytest.fixture(scope='function')
def cashier(db_session):
    """Active cashier with PIN 1234."""
    user_id = auth_service.create_user(
        name="Casey Cashier",
        pin_hash=auth_service.hash_pin("1234"),
        role="cashier",
    )
    return auth_service.get_user(user_id)


@pytest.fixture(scope='function')
def admin(db_session):
    """Active admin with PIN 9999."""
    user_id = auth_service.create_user(
        name="Ada Admin",
        email="ada@litepos.local",
        pin_hash=auth_service.hash_pin("9999"),
        role="admin",
    )
    return auth_service.get_user(user_id)


@pytest.fixture(scope='function')
def drinks(db_session):
    """Category for beverage products."""
    category_id = category_service.create_category(name="Drinks", color="#22c55e")
    return category_service.get_category(category_id)


@pytest.fixture(scope='function')
def coffee(db_session, drinks):
    """$9.99 product taxed at 8.25%."""
    product_id = product_service.create_product(
        name="Coffee Beans",
        sku="COF-001",
        barcode="012345678905",
        category_id=drinks["id"],
        cost_price_cents=450,
        sale_price_cents=999,
        tax_rate_bps=825,
        stock_quantity=20,
        low_stock_threshold=5,
    )
    return product_service.get_product(product_id)


@pytest.fixture(scope='function')
def mug(db_session):
    """$1.00 product taxed at 0.50% (half-cent tax per unit)."""
    product_id = product_service.create_product(
        name="Mug",
        sku="MUG-001",
        sale_price_cents=100,
        tax_rate_bps=50,
        stock_quantity=3,
        low_stock_threshold=5,
    )
    return product_service.get_product(product_id)
