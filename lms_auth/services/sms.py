"""SMS delivery for password reset codes.

TwilioSmsSender sends through the Twilio Messaging API. ConsoleSmsSender
only logs the message and is used in development and tests, where no
Twilio credentials are configured.
"""

import logging
from twilio.rest import Client
from twilio.base.exceptions import TwilioRestException

logger = logging.getLogger(__name__)


class SmsDeliveryError(Exception):
    """Raised when an SMS could not be handed to the provider."""


def format_phone_number(phone: str) -> str:
    """Format a stored mobile number as E.164.

    Args:
        phone: Phone number in any format

    Returns:
        Phone number in E.164 format (e.g., '+14155550123'), or None
    """
    if not phone:
        return None

    digits = ''.join(c for c in phone if c.isdigit())

    if not digits:
        return None

    return '+' + digits


def build_reset_code_message(code: str, ttl_seconds: int = 300) -> str:
    minutes = max(1, ttl_seconds // 60)
    return (
        f"Your password reset code is: {code}. "
        f"This code will expire in {minutes} minutes. "
        f"Do not share this code with anyone."
    )


class TwilioSmsSender:
    """Send plain text messages via Twilio."""

    def __init__(self, account_sid, auth_token, from_number, client=None):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self._client = client

    @property
    def is_configured(self):
        return bool(self.account_sid and self.auth_token and self.from_number)

    def _get_client(self):
        """Get Twilio client instance."""
        if self._client is not None:
            return self._client

        if not self.is_configured:
            raise SmsDeliveryError(
                "Twilio is not configured. Set TWILIO_ACCOUNT_SID, "
                "TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER environment variables."
            )

        self._client = Client(self.account_sid, self.auth_token)
        return self._client

    def send(self, to: str, body: str) -> str:
        """Send ``body`` to ``to`` (E.164) and return the Twilio message SID.

        Raises:
            SmsDeliveryError: If Twilio is not configured or rejects the message
        """
        client = self._get_client()

        try:
            message = client.messages.create(body=body, from_=self.from_number, to=to)
        except TwilioRestException as e:
            logger.error(f"Twilio error sending SMS to {to}: {e}")
            raise SmsDeliveryError('Failed to send SMS. Please try again later.') from e

        logger.info(f"SMS sent to {to}, message SID: {message.sid}")
        return message.sid


class ConsoleSmsSender:
    """Development sender: logs the message instead of sending it."""

    def send(self, to: str, body: str) -> str:
        logger.info(f"[SMS] Twilio disabled - DEV MODE. To: {to} Body: {body}")
        return 'console'
