"""User model for authentication."""

from lms_auth import db
from lms_auth.utils.clock import utcnow

USER_TYPES = ('employee', 'student')


class User(db.Model):
    """LMS account that can log in and recover its password by SMS."""

    __tablename__ = 'users'

    user_id = db.Column(db.String(255), primary_key=True)
    user_type = db.Column(db.Enum(*USER_TYPES, name='user_type', native_enum=False), nullable=False)
    mobile_number = db.Column(db.String(20), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    reset_code = db.relationship(
        'PasswordResetCode', backref='user', uselist=False, cascade='all, delete-orphan'
    )

    def to_dict(self):
        """Public user fields. The password hash is never included."""
        return {
            'user_id': self.user_id,
            'user_type': self.user_type,
            'mobile_number': self.mobile_number,
        }

    def __repr__(self):
        return f'<User {self.user_id}>'
