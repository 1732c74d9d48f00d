"""Auth routes package.

This package organizes authentication-related routes into logical submodules:
- core: Login, the current-user endpoint and the Result -> response helper
- password: SMS password reset flow (forgot, verify code, reset)
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

# Import all route modules (registers routes on auth_bp)
from lms_auth.routes.auth import core  # noqa: E402,F401
from lms_auth.routes.auth import password  # noqa: E402,F401
