"""
Request helpers shared by the API routes:
body parsing, component lookup and the error boundary decorator.
"""

from functools import wraps
from flask import current_app, request
from app import db
from app.buisness.errors import BadRequestError, DomainError
from app.logger import get_logger
from app.utils.logging_sanitizer import sanitize_dict
from app.utils.responses import custom_error, domain_error

logger = get_logger("order_management.routes.api")


def components():
    """The OrderManagement bundle built for this app"""
    return current_app.extensions['order_management']


def json_body():
    """
    Request body as a dict.

    Raises:
        BadRequestError: If the body is missing or is not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequestError('Invalid request body')
    return data


def require_fields(data, *fields):
    missing = [field for field in fields if data.get(field) in (None, '')]
    if missing:
        raise BadRequestError(f"Missing required field(s): {', '.join(missing)}")


def int_field(data, key, required=True):
    """
    Integer value from a body, accepting numeric strings.

    Raises:
        BadRequestError: If the value is missing (when required) or not an integer
    """
    value = data.get(key)
    if value is None:
        if required:
            raise BadRequestError(f"Missing required field(s): {key}")
        return None
    if isinstance(value, bool):
        raise BadRequestError(f"{key} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise BadRequestError(f"{key} must be an integer")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequestError(f"{key} must be an integer")


def api_operation(failure_message):
    """
    Error boundary for an API route.

    Domain errors become typed envelopes. Anything else is logged with its
    traceback, the session is rolled back and a generic 500 envelope is
    returned with `failure_message` as details.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                logger.info(f"{request.method} {request.path} rejected: {e.message}")
                return domain_error(e)
            except Exception as e:
                body = request.get_json(silent=True)
                logger.error(
                    f"{failure_message} ({request.method} {request.path}, "
                    f"body={sanitize_dict(body) if isinstance(body, dict) else body}): {e}",
                    exc_info=True,
                )
                db.session.rollback()
                return custom_error(500, 'E500', failure_message)
        return wrapper
    return decorator
