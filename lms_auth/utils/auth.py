"""Shared authentication utilities.

Decorators that read the bearer token from the ``Authorization`` header and
expose the verified claims as ``g.current_user``.
"""

from functools import wraps
from flask import request, jsonify, g

from lms_auth.services import get_token_service


def _claims_from_request():
    tokens = get_token_service()
    token = tokens.extract_from_header(request.headers.get('Authorization'))
    if not token:
        return None, 'Access token is required'
    claims = tokens.verify(token)
    if not claims:
        return None, 'Invalid or expired token'
    return claims, None


def token_required(f):
    """
    Decorator to require a valid bearer token.

    Sets g.current_user to the token claims
    ({'user_id', 'user_type', 'iat', 'exp'}).

    Usage:
        @auth_bp.route('/me')
        @token_required
        def me():
            return jsonify({'user_id': g.current_user['user_id']})
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        claims, error = _claims_from_request()
        if error:
            return jsonify({'success': False, 'message': error}), 401

        g.current_user = claims
        return f(*args, **kwargs)
    return decorated
