"""Core authentication routes: login and current user."""

from flask import request, jsonify, g

from lms_auth.errors import error_response
from lms_auth.routes.auth import auth_bp
from lms_auth.services import get_auth_service
from lms_auth.utils.auth import token_required
from lms_auth.utils.request_checks import json_required


def respond(result):
    """Convert a service Result into a Flask response."""
    if not result.success:
        return error_response(result.error)
    return jsonify(result.payload), 200


@auth_bp.route('/login', methods=['POST'])
@json_required
def login():
    """Authenticate with user_id and password and return a JWT token."""
    data = request.get_json()
    result = get_auth_service().login(data.get('user_id'), data.get('password'))
    return respond(result)


@auth_bp.route('/me', methods=['GET'])
@token_required
def me():
    """Return the identity carried by the bearer token."""
    return jsonify({
        'success': True,
        'user': {
            'user_id': g.current_user['user_id'],
            'user_type': g.current_user['user_type'],
        },
    }), 200
