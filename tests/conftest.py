"""Test configuration and fixtures."""

import json
import os
from datetime import UTC, datetime, timedelta

import pytest

from core import dependencies
from core.settings import Settings
from payments.api import PayPalClient
from payments.auth import AccessToken, TokenManager


class MockResponse:
    """Stand-in for requests.Response with just the fields the client reads."""

    def __init__(self, status_code, json_data=None, text=None, headers=None):
        self.status_code = status_code
        self._json_data = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.content = text.encode()
        self.headers = headers or {}

    def json(self):
        if self._json_data is None:
            return json.loads(self.text)
        return self._json_data


class FakeClock:
    """Controllable clock for token expiry tests."""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "PAYPAL_CLIENT_ID": "test_client_id",
            "PAYPAL_SECRET": "test_secret",
            "PAYPAL_ENVIRONMENT": "sandbox",
            "ENVIRONMENT": "test",
            "DISABLE_TRACING": "true",
        }
    )
    os.environ.pop("PAYPAL_BASE", None)
    dependencies.clear_settings()

    yield

    dependencies.clear_settings()
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_settings():
    return Settings(
        PAYPAL_CLIENT_ID="test_client_id",
        PAYPAL_SECRET="test_secret",
        PAYPAL_ENVIRONMENT="sandbox",
        PAYPAL_TIMEOUT=5.0,
        PAYPAL_TOKEN_EXPIRY_MARGIN=60,
        ENVIRONMENT="test",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_manager(mock_settings, clock):
    """Token manager pre-loaded with a valid token, so no exchange happens."""
    manager = TokenManager(mock_settings, clock=clock)
    manager._token = AccessToken(
        access_token="test_token",
        scope="https://uri.paypal.com/services/payments/payment",
        expires_at=clock() + timedelta(hours=1),
    )
    return manager


@pytest.fixture
def client(mock_settings, token_manager):
    return PayPalClient(mock_settings, tokens=token_manager)
