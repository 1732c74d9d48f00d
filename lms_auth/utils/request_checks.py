"""Request body guards for JSON endpoints."""

from functools import wraps
from flask import request

from lms_auth.errors import ValidationError, error_response


def json_required(f):
    """
    Reject requests that are not a non-empty JSON object.

    Checks the Content-Type first, then the body. Both failures answer 400.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        content_type = request.headers.get('Content-Type', '')
        if 'application/json' not in content_type:
            return error_response(ValidationError('Content-Type must be application/json'))

        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return error_response(ValidationError('Request body is required'))

        return f(*args, **kwargs)
    return decorated
