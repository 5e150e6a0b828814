"""
Application configuration
Reads settings from environment variables (populated from .env by run.py).
"""

import os
from pathlib import Path
from urllib.parse import quote_plus


BASE_DIR = Path(__file__).parent.parent
INSTANCE_DIR = BASE_DIR / 'instance'

# Product resolution modes for order update/delete
PRODUCT_LOOKUP_BY_PRODUCT = 'product'
PRODUCT_LOOKUP_BY_ORDER_ID = 'order_id'
PRODUCT_LOOKUP_MODES = (PRODUCT_LOOKUP_BY_PRODUCT, PRODUCT_LOOKUP_BY_ORDER_ID)


def _env_flag(name, default='False'):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def build_database_uri():
    """
    Resolve the SQLAlchemy database URI.

    DATABASE_URL wins when set. Otherwise, when DB_HOST is set, a MySQL URI is
    assembled from the DB_* variables. Without either, a SQLite file inside the
    project's instance/ directory is used for local development.
    """
    database_url = os.environ.get('DATABASE_URL')
    if database_url:
        return database_url

    db_host = os.environ.get('DB_HOST')
    if db_host:
        username = quote_plus(os.environ.get('DB_USERNAME', 'root'))
        password = quote_plus(os.environ.get('DB_PASSWORD', ''))
        port = int(os.environ.get('DB_PORT', '3307'))
        name = os.environ.get('DB_NAME', 'order_db')
        credentials = f"{username}:{password}" if password else username
        return f"mysql+pymysql://{credentials}@{db_host}:{port}/{name}"

    return default_sqlite_uri()


def default_sqlite_uri():
    """SQLite file used when no database server is configured"""
    return f"sqlite:///{str((INSTANCE_DIR / 'order_management.db').resolve())}"


def ensure_instance_dir(database_uri):
    """
    Create instance/ when the app runs on the default SQLite file.

    Returns:
        bool: True when the default file is in use
    """
    if database_uri != default_sqlite_uri():
        return False
    INSTANCE_DIR.mkdir(parents=True, exist_ok=True)
    return True


class Config:
    """Settings loaded from the environment at app creation time"""

    def __init__(self):
        self.SQLALCHEMY_DATABASE_URI = build_database_uri()
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        # Server
        self.HOST = os.environ.get('HOST', '0.0.0.0')
        self.PORT = int(os.environ.get('PORT', '5003'))
        self.DEBUG = _env_flag('FLASK_DEBUG')

        # Ordering
        self.ORDER_PRODUCT_LOOKUP = os.environ.get('ORDER_PRODUCT_LOOKUP', PRODUCT_LOOKUP_BY_PRODUCT).lower()
        self.DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', '10'))

        # Rate limiting (Flask-Limiter reads the RATELIMIT_* keys)
        self.RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'True')
        self.RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '200 per minute')
        self.RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')

        # CORS
        self.CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')

    def as_dict(self):
        return {key: value for key, value in vars(self).items() if key.isupper()}
