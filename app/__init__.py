from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from app.logger import get_logger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)


def create_app(config_overrides=None):
    """
    Application factory.

    Args:
        config_overrides (dict, optional): Settings applied on top of the
            environment-derived configuration (used by tests)

    Returns:
        Flask: Configured application
    """
    from app.config import Config, PRODUCT_LOOKUP_MODES, ensure_instance_dir
    from app.utils.logging_sanitizer import sanitize_config

    app = Flask(__name__)

    logger = get_logger("order_management")
    logger.info("Initializing Flask application")

    app.config.from_mapping(Config().as_dict())
    if config_overrides:
        app.config.from_mapping(config_overrides)
    app.json.sort_keys = False

    if app.config['ORDER_PRODUCT_LOOKUP'] not in PRODUCT_LOOKUP_MODES:
        logger.critical(f"Invalid ORDER_PRODUCT_LOOKUP: {app.config['ORDER_PRODUCT_LOOKUP']}")
        raise RuntimeError(f"ORDER_PRODUCT_LOOKUP must be one of {', '.join(PRODUCT_LOOKUP_MODES)}")

    if ensure_instance_dir(app.config['SQLALCHEMY_DATABASE_URI']):
        logger.debug("Using the default SQLite database in instance/")

    logger.debug(f"Configuration loaded: {sanitize_config(app.config)}")

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from app.data.core.user import User
    from app.data.inventory.product import Product
    from app.data.ordering.order import Order

    logger.debug("Models imported and registered")

    # Explicitly constructed repositories, ledger and workflow for this app
    from app.buisness.ordering.factory import build_order_management
    app.extensions['order_management'] = build_order_management(
        db.session,
        product_lookup=app.config['ORDER_PRODUCT_LOOKUP'],
        default_page_size=app.config['DEFAULT_PAGE_SIZE'],
    )

    from app.presentation.routes import init_app as init_routes
    init_routes(app)

    @app.after_request
    def set_cors_headers(response):
        """Allow cross-origin API access"""
        response.headers['Access-Control-Allow-Origin'] = app.config['CORS_ORIGIN']
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response

    logger.info("Flask application initialization complete")

    return app
