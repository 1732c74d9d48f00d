"""Password reset routes: forgot-password, verify-code and reset-password.

None of these need a token: the user has forgotten the password and
cannot log in.
"""

from flask import request, current_app

from lms_auth.routes.auth import auth_bp
from lms_auth.routes.auth.core import respond
from lms_auth.services import get_auth_service
from lms_auth.utils.request_checks import json_required


@auth_bp.route('/forgot-password', methods=['POST'])
@json_required
def forgot_password():
    """Send an SMS verification code to the user's registered mobile number."""
    data = request.get_json()
    current_app.logger.debug("Password reset requested")
    return respond(get_auth_service().request_password_reset(data.get('user_id')))


@auth_bp.route('/verify-code', methods=['POST'])
@json_required
def verify_code():
    """Check an SMS verification code without consuming it."""
    data = request.get_json()
    result = get_auth_service().verify_reset_code(data.get('user_id'), data.get('code'))
    return respond(result)


@auth_bp.route('/reset-password', methods=['POST'])
@json_required
def reset_password():
    """Set a new password using a valid verification code."""
    data = request.get_json()
    result = get_auth_service().reset_password(
        data.get('user_id'),
        data.get('code'),
        data.get('new_password'),
    )
    return respond(result)
