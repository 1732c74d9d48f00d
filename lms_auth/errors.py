"""
Application error hierarchy and Flask error handlers.

AppError is the base for all typed errors. Services hand them back inside
a Result; routes and the global handlers turn them into JSON responses of
the shape ``{"success": false, "message": ...}``.

Non-AppError exceptions bubble up to the catch-all handler and answer 500
without exposing internal detail.
"""

from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    """Base application error. All typed errors inherit from this."""

    status_code = 500
    error_code = 'internal_error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(AppError):
    status_code = 400
    error_code = 'validation_error'


class AuthenticationError(AppError):
    status_code = 401
    error_code = 'authentication_error'


class NotFoundError(AppError):
    status_code = 404
    error_code = 'not_found'


class InternalError(AppError):
    status_code = 500
    error_code = 'internal_error'


def error_response(error):
    """Build a ``(response, status)`` pair for an AppError."""
    return jsonify(error.to_dict()), error.status_code


def register_error_handlers(app):
    """Register global error handlers on the Flask app."""

    @app.errorhandler(AppError)
    def handle_app_error(error):
        if error.status_code >= 500:
            current_app.logger.exception(f"{error.error_code}: {error.message}")
        return error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'success': False, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception(f"Unhandled error: {error}")
        payload = {'success': False, 'message': 'Internal server error'}
        if current_app.debug:
            payload['error'] = str(error)
        return jsonify(payload), 500
