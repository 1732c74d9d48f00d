"""Service wiring.

Collaborators are built once per application and stored on
``app.extensions`` so routes (and tests) reach them through the app
instead of module-level singletons.
"""

from flask import current_app

from lms_auth.services.auth_service import AuthService
from lms_auth.services.credential_store import SQLAlchemyCredentialStore
from lms_auth.services.password import PasswordHasher
from lms_auth.services.reset_codes import ResetCodeEngine
from lms_auth.services.sms import TwilioSmsSender, ConsoleSmsSender
from lms_auth.services.tokens import TokenService


def build_sms_sender(config):
    if config['SMS_BACKEND'] == 'console':
        return ConsoleSmsSender()
    return TwilioSmsSender(
        config['TWILIO_ACCOUNT_SID'],
        config['TWILIO_AUTH_TOKEN'],
        config['TWILIO_PHONE_NUMBER'],
    )


def build_services(app):
    """Construct the auth collaborators for ``app``."""
    config = app.config

    sms_sender = build_sms_sender(config)
    if isinstance(sms_sender, TwilioSmsSender) and not sms_sender.is_configured:
        app.logger.warning('Twilio configuration is incomplete. SMS functionality may not work.')

    tokens = TokenService(
        config['JWT_SECRET_KEY'],
        expires_in=config['JWT_EXPIRES_IN'],
        algorithm=config['JWT_ALGORITHM'],
    )
    store = SQLAlchemyCredentialStore()
    reset_codes = ResetCodeEngine(store, ttl_seconds=config['RESET_CODE_TTL_SECONDS'])

    app.extensions['token_service'] = tokens
    app.extensions['auth_service'] = AuthService(
        store=store,
        hasher=PasswordHasher(),
        tokens=tokens,
        reset_codes=reset_codes,
        sms_sender=sms_sender,
    )


def get_auth_service():
    return current_app.extensions['auth_service']


def get_token_service():
    return current_app.extensions['token_service']
