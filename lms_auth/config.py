"""Application configuration classes.

Values are read from environment variables (``.env`` is loaded by the
package ``__init__``). ``create_app`` picks a class by name.
"""

import os


def _database_url():
    url = os.getenv('DATABASE_URL', 'sqlite:///lms_auth.db')
    # Handle Render/Heroku's postgres:// vs postgresql:// issue
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRES_IN = int(os.getenv('JWT_EXPIRES_IN', 86400))  # 24 hours
    REQUIRE_JWT_SECRET = False

    RESET_CODE_TTL_SECONDS = int(os.getenv('RESET_CODE_TTL_SECONDS', 300))  # 5 minutes

    # 'twilio' sends real SMS, 'console' only logs the message
    SMS_BACKEND = os.getenv('SMS_BACKEND', 'twilio')
    TWILIO_ACCOUNT_SID = os.getenv('TWILIO_ACCOUNT_SID')
    TWILIO_AUTH_TOKEN = os.getenv('TWILIO_AUTH_TOKEN')
    TWILIO_PHONE_NUMBER = os.getenv('TWILIO_PHONE_NUMBER')

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    DEBUG = True
    SMS_BACKEND = os.getenv('SMS_BACKEND', 'console')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG').upper()


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET_KEY = 'test-secret-key-for-testing'
    SMS_BACKEND = 'console'
    LOG_LEVEL = 'WARNING'


class ProductionConfig(Config):
    REQUIRE_JWT_SECRET = True


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}


def get_config(config_name):
    """Return the config class for ``config_name`` (development if unknown)."""
    return CONFIGS.get(config_name or 'development', DevelopmentConfig)
