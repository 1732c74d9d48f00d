"""Database models for the authentication service."""

from .user import User, USER_TYPES
from .password_reset import PasswordResetCode

__all__ = ['User', 'USER_TYPES', 'PasswordResetCode']
