"""One-time SMS reset codes.

Lifecycle of a user's code:

    Active --verify_code (match, unexpired)--> Active   (read-only check)
    Active --consume_and_reset_password-----> Consumed (terminal)
    Active --TTL elapses--------------------> Expired  (computed, never stored)
    Active --request_code again-------------> superseded by the new code

Expiry is evaluated lazily on every read; nothing sweeps old rows.
"""

import logging
import secrets
from collections import namedtuple
from datetime import timedelta

from lms_auth.utils.clock import utcnow

logger = logging.getLogger(__name__)

RESET_CODE_LENGTH = 6
DEFAULT_RESET_CODE_TTL_SECONDS = 300  # 5 minutes

IssuedCode = namedtuple('IssuedCode', ['code', 'mobile_number', 'expires_at'])


def generate_reset_code() -> str:
    """Generate a 6-digit code, uniform over 000000-999999."""
    return ''.join([str(secrets.randbelow(10)) for _ in range(RESET_CODE_LENGTH)])


class ResetCodeEngine:
    """Issues, checks and consumes reset codes against a credential store."""

    def __init__(self, store, ttl_seconds=DEFAULT_RESET_CODE_TTL_SECONDS,
                 clock=utcnow, generate_code=generate_reset_code):
        self.store = store
        self.ttl = timedelta(seconds=ttl_seconds)
        self.clock = clock
        self.generate_code = generate_code

    def request_code(self, user_id):
        """
        Issue a fresh code for ``user_id``, superseding any earlier one.

        Returns an IssuedCode, or None when the user does not exist. The
        caller must not reveal the None case to the client.
        """
        code = self.generate_code()
        issued_at = self.clock()
        expires_at = issued_at + self.ttl

        mobile_number = self.store.create_or_replace_reset_code(
            user_id, code, issued_at, expires_at
        )
        if mobile_number is None:
            return None

        logger.debug(f"Reset code issued for user_id: {user_id}, expires at {expires_at}")
        return IssuedCode(code, mobile_number, expires_at)

    def verify_code(self, user_id, code) -> bool:
        """True iff ``code`` is the user's current, unconsumed, unexpired code."""
        return self.store.verify_reset_code(user_id, code, self.clock())

    def consume_and_reset_password(self, user_id, code, new_password_hash) -> bool:
        """
        Consume ``code`` and store the new password hash atomically.

        The code is validated again here; an earlier verify_code result is
        never trusted. Returns False if the user is missing or the code is
        no longer valid.
        """
        consumed = self.store.update_password(user_id, code, new_password_hash, self.clock())
        if consumed:
            logger.info(f"Password reset completed for user_id: {user_id}")
        return consumed
