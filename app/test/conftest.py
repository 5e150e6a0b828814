"""
Pytest configuration and fixtures for the Order Management API tests
"""
import os

# The logger is configured on first import; keep test runs off the log files
os.environ["LOG_DIR"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from app import create_app
from app import db as _db
from app.config import PRODUCT_LOOKUP_BY_ORDER_ID

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'RATELIMIT_ENABLED': False,
}


def make_app(**overrides):
    """Create an application on a private in-memory database"""
    config = dict(TEST_CONFIG)
    config.update(overrides)
    return create_app(config)


def _app_with_tables(app):
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def app():
    """Application with an empty schema, resolving products by order.product_id"""
    yield from _app_with_tables(make_app())


@pytest.fixture(scope='function')
def legacy_app():
    """Application resolving update/delete products by the order's own id"""
    yield from _app_with_tables(make_app(ORDER_PRODUCT_LOOKUP=PRODUCT_LOOKUP_BY_ORDER_ID))


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Scoped session bound to the test application's database"""
    return _db.session


@pytest.fixture(scope='function')
def components(app):
    """OrderManagement bundle of the test application"""
    return app.extensions['order_management']


@pytest.fixture(scope='function')
def legacy_components(legacy_app):
    return legacy_app.extensions['order_management']


def add_user(components, name='Alice', email='alice@example.com'):
    """Helper function to create a user through the manager"""
    return components.users.create(name=name, email=email)


def add_product(components, code='SKU1', amount=10, price='9.99', name=None, description=''):
    """Helper function to create a product through the manager"""
    return components.products.create({
        'code': code,
        'name': name or f'Product {code}',
        'description': description,
        'price': price,
        'amount': amount,
    })
