"""
Pytest configuration and fixtures for testing the LMS auth API.
"""

import os
import re
import sys
from collections import Counter
from datetime import timedelta

import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lms_auth import create_app, db  # noqa: E402
from lms_auth.models import User, PasswordResetCode  # noqa: E402
from lms_auth.services.password import PasswordHasher  # noqa: E402
from lms_auth.services.sms import SmsDeliveryError  # noqa: E402
from lms_auth.utils.clock import utcnow  # noqa: E402

fake = Faker()

CODE_IN_SMS = re.compile(r'code is: (\d{6})')


# ============================================================
#  FAKES
# ============================================================

class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now=None):
        self.now = now or utcnow().replace(microsecond=0)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


class RecordingSmsSender:
    """Keeps every message instead of sending it."""

    def __init__(self, fail=False):
        self.fail = fail
        self.messages = []

    def send(self, to, body):
        if self.fail:
            raise SmsDeliveryError('provider unavailable')
        self.messages.append({'to': to, 'body': body})
        return f'SM{len(self.messages):04d}'

    @property
    def last_code(self):
        match = CODE_IN_SMS.search(self.messages[-1]['body'])
        return match.group(1) if match else None


class InMemoryCredentialStore:
    """Credential store double with per-method call counters."""

    def __init__(self):
        self.users = {}
        self.reset_codes = {}
        self.calls = Counter()

    @property
    def total_calls(self):
        return sum(self.calls.values())

    def add_user(self, user_id, password_hash, user_type='student', mobile_number='+14155550123'):
        user = User(
            user_id=user_id,
            user_type=user_type,
            mobile_number=mobile_number,
            password_hash=password_hash,
        )
        self.users[user_id] = user
        return user

    def find_user_with_password_hash(self, user_id):
        self.calls['find_user_with_password_hash'] += 1
        return self.users.get(user_id)

    def find_mobile_number(self, user_id):
        self.calls['find_mobile_number'] += 1
        user = self.users.get(user_id)
        return user.mobile_number if user else None

    def create_or_replace_reset_code(self, user_id, code, issued_at, expires_at):
        self.calls['create_or_replace_reset_code'] += 1
        user = self.users.get(user_id)
        if user is None:
            return None
        self.reset_codes[user_id] = PasswordResetCode(
            user_id=user_id,
            code=code,
            issued_at=issued_at,
            expires_at=expires_at,
            consumed=False,
        )
        return user.mobile_number

    def verify_reset_code(self, user_id, code, now):
        self.calls['verify_reset_code'] += 1
        reset_code = self.reset_codes.get(user_id)
        return reset_code is not None and reset_code.is_valid_for(code, now)

    def update_password(self, user_id, code, password_hash, now):
        self.calls['update_password'] += 1
        user = self.users.get(user_id)
        reset_code = self.reset_codes.get(user_id)
        if user is None or reset_code is None or not reset_code.is_valid_for(code, now):
            return False
        reset_code.consumed = True
        user.password_hash = password_hash
        return True


# ============================================================
#  APPLICATION FIXTURES
# ============================================================

@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


@pytest.fixture
def auth_service(app):
    return app.extensions['auth_service']


@pytest.fixture
def sms_outbox(auth_service, monkeypatch):
    """Replace the app's SMS sender with a recording one."""
    sender = RecordingSmsSender()
    monkeypatch.setattr(auth_service, 'sms_sender', sender)
    return sender


@pytest.fixture
def frozen_clock(auth_service, monkeypatch):
    """Freeze the reset code engine's clock for expiry tests."""
    clock = FakeClock()
    monkeypatch.setattr(auth_service.reset_codes, 'clock', clock)
    return clock


@pytest.fixture
def fixed_code(auth_service, monkeypatch):
    """Make the reset code engine always issue 482913."""
    monkeypatch.setattr(auth_service.reset_codes, 'generate_code', lambda: '482913')
    return '482913'


def _create_user(password='hunter22', **overrides):
    """Helper to create a user with sensible defaults."""
    data = {
        'user_id': fake.unique.bothify(text='U#####'),
        'user_type': 'student',
        'mobile_number': '+1' + fake.numerify(text='415#######'),
    }
    data.update(overrides)
    user = User(password_hash=PasswordHasher().hash(password), **data)
    db.session.add(user)
    db.session.commit()
    return {**data, 'password': password}


@pytest.fixture
def make_user(app, db_session):
    """Factory fixture: ``make_user(user_id='U100', password='hunter22')``."""
    def factory(**kwargs):
        return _create_user(**kwargs)
    return factory


@pytest.fixture
def test_user(make_user):
    """Create a test user."""
    return make_user()


# ============================================================
#  UNIT-LEVEL FIXTURES
# ============================================================

@pytest.fixture
def fake_store():
    return InMemoryCredentialStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hasher():
    return PasswordHasher()
