#!/usr/bin/env python3
"""
Database build for the Order Management API
Creates the tables and optionally inserts development seed data
"""

import json
from pathlib import Path
from app import create_app, db
from app.logger import get_logger

logger = get_logger("order_management.build")

SEED_DATA_FILE = Path(__file__).parent / 'data' / 'seed_data.json'


def build_models():
    """Create all tables that do not exist yet"""
    from app.data.core.user import User
    from app.data.inventory.product import Product
    from app.data.ordering.order import Order

    db.create_all()
    logger.info("All database tables created")


def load_seed_data(seed_file=SEED_DATA_FILE):
    """
    Load seed records from JSON

    Returns:
        dict: {"users": [...], "products": [...]}
    """
    with open(seed_file, encoding='utf-8') as f:
        return json.load(f)


def insert_seed_data(components, seed_data):
    """
    Insert seed users and products that are not present yet

    Users are matched by email and products by code, so running the build
    twice does not duplicate rows.

    Returns:
        tuple: (users inserted, products inserted)
    """
    users_inserted = 0
    for user_data in seed_data.get('users', []):
        if components.users.users.get_by_email(user_data['email']) is not None:
            continue
        components.users.create(name=user_data['name'], email=user_data['email'])
        users_inserted += 1
        logger.info(f"Inserted seed user: {user_data['email']}")

    products_inserted = 0
    for product_data in seed_data.get('products', []):
        if components.products.products.get_by_code(product_data['code']) is not None:
            continue
        components.products.create(product_data)
        products_inserted += 1
        logger.info(f"Inserted seed product: {product_data['code']}")

    return users_inserted, products_inserted


def build_database(app=None, seed=False):
    """
    Build the database

    Args:
        app: Flask app to build against (created from the environment when omitted)
        seed (bool): Insert development seed data after creating tables
    """
    if app is None:
        app = create_app()

    with app.app_context():
        logger.info(f"Starting database build (seed={seed})")
        build_models()

        if seed:
            try:
                users, products = insert_seed_data(app.extensions['order_management'], load_seed_data())
                logger.info(f"Seed data inserted: {users} users, {products} products")
            except Exception as e:
                db.session.rollback()
                logger.error(f"Seed data insertion failed: {e}")
                raise

        logger.info("Database build completed successfully")
