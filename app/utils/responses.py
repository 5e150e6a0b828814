"""
Response envelope helpers
Uniform success and error bodies for every API response.
"""

from datetime import datetime, timezone
from flask import jsonify, request, has_request_context

# API error code -> generic message
ERROR_MESSAGES = {
    'E400': 'Bad request',
    'E404': 'Not found',
    'E409': 'Conflict',
    'E429': 'Too many requests',
    'E500': 'Internal Server Error',
}


def get_error_message(error_code):
    return ERROR_MESSAGES.get(error_code, 'Unknown error')


def success_body(message, data):
    return {
        'status': 200,
        'message': message,
        'data': data,
    }


def error_body(status=500, error_code='E500', error_details='Internal Server Error', path=None):
    """
    Build the error envelope.

    Args:
        status: HTTP status code
        error_code: API error code (E404, E409, ...)
        error_details: Specific description of what went wrong
        path: Originating request path; defaults to the current request's path

    Returns:
        dict: message, timestamp, status, errorDetails, errorCode, path
    """
    if path is None and has_request_context():
        path = request.full_path.rstrip('?') if request.query_string else request.path

    timestamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    return {
        'message': get_error_message(error_code),
        'timestamp': timestamp,
        'status': status,
        'errorDetails': error_details,
        'errorCode': error_code,
        'path': path,
    }


def custom_success(message, data=None):
    return jsonify(success_body(message, data)), 200


def custom_error(status=500, error_code='E500', error_details='Internal Server Error', path=None):
    return jsonify(error_body(status, error_code, error_details, path)), status


def domain_error(error):
    """Envelope for a DomainError raised by the business layer"""
    return custom_error(error.status, error.error_code, error.message)
