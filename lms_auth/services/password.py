"""Password hashing for credential storage."""

import logging
from werkzeug.security import generate_password_hash, check_password_hash

from lms_auth.errors import InternalError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way hash and verify, backed by werkzeug's salted hashes."""

    def hash(self, password: str) -> str:
        try:
            return generate_password_hash(password)
        except Exception as e:
            logger.error(f"Password hashing failed: {e}")
            raise InternalError('Error hashing password') from e

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash."""
        try:
            return check_password_hash(password_hash, password)
        except Exception as e:
            logger.error(f"Password comparison failed: {e}")
            raise InternalError('Error comparing passwords') from e
