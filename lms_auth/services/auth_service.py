"""Login and SMS password-reset orchestration.

AuthService validates input first (no store access for malformed input),
then calls the credential store, hasher, token service, reset code engine
and SMS sender in sequence. Outcomes come back as Result values; the routes
turn them into HTTP responses. Store, hasher and signing failures are not
caught here and reach the global error handler as 500s.
"""

import logging

from lms_auth.errors import ValidationError, AuthenticationError, NotFoundError
from lms_auth.services.result import Result
from lms_auth.services.sms import format_phone_number, build_reset_code_message
from lms_auth.utils.validators import (
    is_valid_user_id,
    is_valid_verification_code,
    is_valid_password,
    PASSWORD_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
)

logger = logging.getLogger(__name__)

# Same text whether or not the user exists
FORGOT_PASSWORD_MESSAGE = (
    'If the user exists, a verification code has been sent to the registered mobile number'
)
INVALID_CREDENTIALS_MESSAGE = 'Invalid credentials'
INVALID_CODE_MESSAGE = 'Invalid or expired verification code'
INVALID_USER_ID_MESSAGE = 'Invalid user ID format'
INVALID_CODE_FORMAT_MESSAGE = 'Invalid verification code format. Code must be 6 digits'


class AuthService:
    """Facade over the credential primitives used by the auth routes."""

    def __init__(self, store, hasher, tokens, reset_codes, sms_sender):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.reset_codes = reset_codes
        self.sms_sender = sms_sender

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    def login(self, user_id, password) -> Result:
        if not user_id or not password:
            return Result.fail(ValidationError('User ID and password are required'))
        if not is_valid_user_id(user_id):
            return Result.fail(ValidationError(INVALID_USER_ID_MESSAGE))
        if not isinstance(password, str):
            return Result.fail(ValidationError('Password must be a string'))

        user = self.store.find_user_with_password_hash(user_id)
        if user is None or not self.hasher.verify(password, user.password_hash):
            return Result.fail(AuthenticationError(INVALID_CREDENTIALS_MESSAGE))

        token = self.tokens.issue(user.user_id, user.user_type)
        logger.info(f"Login successful for user_id: {user.user_id}")

        return Result.ok(
            message='Login successful',
            user=user.to_dict(),
            token=token,
        )

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------

    def request_password_reset(self, user_id) -> Result:
        """Issue a reset code and text it to the user's registered number.

        Always answers with the same generic message so callers cannot tell
        whether ``user_id`` exists. A failed SMS is logged but still reported
        as success.
        """
        if not user_id:
            return Result.fail(ValidationError('User ID is required'))
        if not is_valid_user_id(user_id):
            return Result.fail(ValidationError(INVALID_USER_ID_MESSAGE))

        # The code is committed before any delivery attempt
        issued = self.reset_codes.request_code(user_id)

        if issued is None:
            logger.debug(f"Password reset requested for unknown user_id: {user_id}")
        else:
            self._deliver_reset_code(user_id, issued)

        return Result.ok(message=FORGOT_PASSWORD_MESSAGE)

    def _deliver_reset_code(self, user_id, issued):
        phone = format_phone_number(issued.mobile_number)
        if not phone:
            logger.error(f"No usable mobile number for user_id: {user_id}, reset code not sent")
            return

        ttl_seconds = int(self.reset_codes.ttl.total_seconds())
        message = build_reset_code_message(issued.code, ttl_seconds)
        try:
            self.sms_sender.send(phone, message)
        except Exception as e:
            # Delivery failures are invisible to the caller; this log line is the only trace
            logger.error(f"SMS delivery failed for user_id: {user_id}: {e}")

    def verify_reset_code(self, user_id, code) -> Result:
        if not user_id or not code:
            return Result.fail(ValidationError('User ID and verification code are required'))
        if not is_valid_user_id(user_id):
            return Result.fail(ValidationError(INVALID_USER_ID_MESSAGE))
        if not is_valid_verification_code(code):
            return Result.fail(ValidationError(INVALID_CODE_FORMAT_MESSAGE))

        if not self.reset_codes.verify_code(user_id, code):
            return Result.fail(ValidationError(INVALID_CODE_MESSAGE))

        return Result.ok(message='Verification code is valid', verified=True)

    def reset_password(self, user_id, code, new_password) -> Result:
        if not user_id or not code or not new_password:
            return Result.fail(ValidationError(
                'User ID, verification code, and new password are required'
            ))
        if not is_valid_user_id(user_id):
            return Result.fail(ValidationError(INVALID_USER_ID_MESSAGE))
        if not is_valid_verification_code(code):
            return Result.fail(ValidationError(INVALID_CODE_FORMAT_MESSAGE))
        if not is_valid_password(new_password):
            return Result.fail(ValidationError(
                f'Password must be between {PASSWORD_MIN_LENGTH} and '
                f'{PASSWORD_MAX_LENGTH} characters long'
            ))

        if not self.reset_codes.verify_code(user_id, code):
            return Result.fail(ValidationError(INVALID_CODE_MESSAGE))

        password_hash = self.hasher.hash(new_password)

        # Re-checks the code inside the store transaction
        if not self.reset_codes.consume_and_reset_password(user_id, code, password_hash):
            return Result.fail(NotFoundError('Failed to update password. User not found'))

        return Result.ok(message='Password has been reset successfully')
