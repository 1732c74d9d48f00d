#!/usr/bin/env python3
"""Script to create (or update) a user account.

Accounts are provisioned outside the API, which only supports login and
password recovery. The password is read from the terminal.
"""

import getpass
import os
import sys

# Add parent directory to path to import lms_auth modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lms_auth import create_app, db  # noqa: E402
from lms_auth.models import User, USER_TYPES  # noqa: E402
from lms_auth.services.password import PasswordHasher  # noqa: E402
from lms_auth.utils.validators import (  # noqa: E402
    is_valid_user_id,
    is_valid_mobile_number,
    is_valid_password,
)


def create_user(user_id: str, user_type: str, mobile_number: str, password: str) -> bool:
    """Create a user, or replace the details of an existing one.

    Returns:
        True if the user was saved, False on validation or database error
    """
    if not is_valid_user_id(user_id):
        print(f"❌ Invalid user ID: {user_id!r}")
        return False
    if user_type not in USER_TYPES:
        print(f"❌ User type must be one of: {', '.join(USER_TYPES)}")
        return False
    if not is_valid_mobile_number(mobile_number):
        print(f"❌ Invalid mobile number: {mobile_number}")
        return False
    if not is_valid_password(password):
        print("❌ Password must be between 8 and 128 characters long")
        return False

    user = db.session.get(User, user_id)
    action = 'updated' if user else 'created'
    if not user:
        user = User(user_id=user_id)
        db.session.add(user)

    user.user_type = user_type
    user.mobile_number = mobile_number
    user.password_hash = PasswordHasher().hash(password)

    try:
        db.session.commit()
        print(f"\n✅ User {action}: {user_id} ({user_type}, {mobile_number})")
        return True
    except Exception as e:
        db.session.rollback()
        print(f"\n❌ Error saving user: {str(e)}")
        return False


if __name__ == '__main__':
    if len(sys.argv) != 4:
        print("Usage: python create_user.py <user_id> <employee|student> <mobile_number>")
        print("Example: python create_user.py U100 student +14155550123")
        sys.exit(1)

    user_id, user_type, mobile = sys.argv[1:]
    password = getpass.getpass("Password: ")

    app = create_app(os.getenv('FLASK_ENV', 'development'))
    with app.app_context():
        ok = create_user(user_id, user_type, mobile, password)
    sys.exit(0 if ok else 1)
