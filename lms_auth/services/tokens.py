"""JWT bearer tokens.

Tokens are self-contained: the server keeps no session state and there is
no revocation list, so a token stays valid until its ``exp`` passes.
"""

import logging
from datetime import timedelta

import jwt

from lms_auth.utils.clock import utcnow

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '
REQUIRED_CLAIMS = ('user_id', 'user_type', 'iat', 'exp')


class TokenService:
    """Issue and verify signed, time-limited bearer tokens."""

    def __init__(self, secret_key, expires_in=86400, algorithm='HS256', clock=utcnow):
        self.secret_key = secret_key
        self.expires_in = expires_in
        self.algorithm = algorithm
        self.clock = clock

    def issue(self, user_id: str, user_type: str) -> str:
        issued_at = self.clock()
        payload = {
            'user_id': user_id,
            'user_type': user_type,
            'iat': issued_at,
            'exp': issued_at + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str):
        """
        Decode and validate a token.

        Returns the claims dict, or None when the token is malformed, has a
        bad signature, is expired or lacks one of the expected claims.
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={'require': list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected invalid token: {e}")
            return None

    @staticmethod
    def extract_from_header(header_value):
        """Return the token from an ``Authorization: Bearer <token>`` header, or None."""
        if not header_value or not header_value.startswith(BEARER_PREFIX):
            return None
        token = header_value[len(BEARER_PREFIX):].strip()
        return token or None
