"""SQLAlchemy-backed credential store.

Every operation that writes two things (replace a reset code, consume a
code and change the password) runs in one transaction that first locks the
user's row with ``SELECT ... FOR UPDATE``. Concurrent requests for the same
user are therefore serialized: the last reset request wins, and a code can
only be consumed once.
"""

import logging

from lms_auth import db
from lms_auth.models import User, PasswordResetCode

logger = logging.getLogger(__name__)


class SQLAlchemyCredentialStore:
    """Lookups and transactional updates on users and their reset codes."""

    def find_user_with_password_hash(self, user_id):
        """Return the User (including its password hash) or None."""
        return db.session.get(User, user_id)

    def find_mobile_number(self, user_id):
        user = db.session.get(User, user_id)
        return user.mobile_number if user else None

    def create_or_replace_reset_code(self, user_id, code, issued_at, expires_at):
        """
        Store ``code`` as the user's only reset code.

        Returns the user's mobile number, or None if the user does not exist.
        """
        try:
            user = self._lock_user(user_id)
            if not user:
                db.session.rollback()
                return None

            reset_code = db.session.get(PasswordResetCode, user_id)
            if reset_code is None:
                reset_code = PasswordResetCode(user_id=user_id)
                db.session.add(reset_code)

            reset_code.code = code
            reset_code.issued_at = issued_at
            reset_code.expires_at = expires_at
            reset_code.consumed = False

            mobile_number = user.mobile_number
            db.session.commit()
            return mobile_number
        except Exception:
            db.session.rollback()
            logger.exception(f"Failed to store reset code for user_id: {user_id}")
            raise

    def verify_reset_code(self, user_id, code, now):
        reset_code = db.session.get(PasswordResetCode, user_id)
        if reset_code is None:
            return False
        return reset_code.is_valid_for(code, now)

    def update_password(self, user_id, code, password_hash, now):
        """
        Consume ``code`` and set the new password hash in one transaction.

        The code is re-checked under the row lock. Returns False (and
        changes nothing) when the user is missing or the code is not valid.
        """
        try:
            user = self._lock_user(user_id)
            reset_code = db.session.get(PasswordResetCode, user_id) if user else None

            if reset_code is None or not reset_code.is_valid_for(code, now):
                db.session.rollback()
                return False

            reset_code.consumed = True
            user.password_hash = password_hash
            user.updated_at = now
            db.session.commit()
            return True
        except Exception:
            db.session.rollback()
            logger.exception(f"Failed to update password for user_id: {user_id}")
            raise

    @staticmethod
    def _lock_user(user_id):
        return User.query.filter_by(user_id=user_id).with_for_update().first()
