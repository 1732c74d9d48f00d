"""Password Reset Code model for the SMS forgot-password flow."""

from lms_auth import db
from lms_auth.utils.clock import utcnow


class PasswordResetCode(db.Model):
    """
    One-time SMS code for a user.

    There is a single row per user: requesting a new code overwrites it,
    which invalidates whatever code was sent before.
    """

    __tablename__ = 'password_reset_codes'

    user_id = db.Column(db.String(255), db.ForeignKey('users.user_id'), primary_key=True)
    code = db.Column(db.String(6), nullable=False)
    issued_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    consumed = db.Column(db.Boolean, default=False, nullable=False)

    def is_expired(self, now):
        return now >= self.expires_at

    def is_valid_for(self, code, now):
        """
        Check whether ``code`` can be used at ``now``.

        Valid means unconsumed, ``now < expires_at`` and an exact string
        match. Nothing is mutated.
        """
        if self.consumed or self.is_expired(now):
            return False
        return self.code == code

    def __repr__(self):
        return f'<PasswordResetCode user_id={self.user_id} expires_at={self.expires_at}>'
