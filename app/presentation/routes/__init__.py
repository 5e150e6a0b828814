"""
Routes package for the Order Management API
JSON blueprints, the health probe and the application-wide error handlers
"""

from werkzeug.exceptions import HTTPException
from app.logger import get_logger
from app.utils.responses import custom_error

logger = get_logger("order_management.routes")


def init_app(app):
    """Register blueprints and error handlers with the Flask app"""
    logger.debug("Initializing route blueprints")

    from .api import api_bp
    from .health import bp as health_bp

    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(health_bp)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(e):
        return custom_error(404, 'E404', 'Route not found')

    @app.errorhandler(429)
    def rate_limited(e):
        logger.warning(f"Rate limit exceeded: {e.description}")
        return custom_error(429, 'E429', f"Rate limit exceeded: {e.description}")

    @app.errorhandler(Exception)
    def unhandled_error(e):
        if isinstance(e, HTTPException):
            return custom_error(e.code, f"E{e.code}", e.description)
        logger.error(f"Unhandled error: {e}", exc_info=True)
        return custom_error()

    logger.debug("Route blueprints registered")
