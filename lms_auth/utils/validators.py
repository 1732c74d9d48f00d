"""Input format validators shared by the auth service."""

import re

USER_ID_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

VERIFICATION_CODE_REGEX = re.compile(r'^[0-9]{6}$')
MOBILE_NUMBER_REGEX = re.compile(r'^\+?[1-9][0-9]{9,14}$')


def is_valid_user_id(user_id):
    """Non-empty (after trimming) string of at most 255 characters."""
    if not isinstance(user_id, str):
        return False
    return bool(user_id.strip()) and len(user_id) <= USER_ID_MAX_LENGTH


def is_valid_verification_code(code):
    """Exactly six ASCII digits."""
    return isinstance(code, str) and VERIFICATION_CODE_REGEX.fullmatch(code) is not None


def is_valid_password(password):
    return (
        isinstance(password, str)
        and PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH
    )


def is_valid_mobile_number(mobile_number):
    """Loose check: optional +, 10-15 digits, separators ignored."""
    if not isinstance(mobile_number, str):
        return False
    cleaned = re.sub(r'[\s\-()]', '', mobile_number)
    return MOBILE_NUMBER_REGEX.fullmatch(cleaned) is not None
