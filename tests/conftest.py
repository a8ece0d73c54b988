"""Test configuration and fixtures."""

import os
from unittest.mock import patch

import pytest

from mock_paypal import API_BASE, FakePayPal, WebProfileServer
from paypalsdk import Client
from paypalsdk.core.settings import Settings


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "PAYPAL_CLIENT_ID": "test_client_id",
            "PAYPAL_SECRET": "test_secret",
            "PAYPAL_BASE": API_BASE,
            "ENVIRONMENT": "test",
        }
    )

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_settings():
    return Settings(
        PAYPAL_CLIENT_ID="test_client_id",
        PAYPAL_SECRET="test_secret",
        PAYPAL_BASE=API_BASE,
        PAYPAL_TIMEOUT=5.0,
        ENVIRONMENT="test",
    )


@pytest.fixture
def paypal():
    """Fake PayPal API with only the token endpoint routed."""
    return FakePayPal()


@pytest.fixture
def client(paypal):
    c = Client("foo", "bar", API_BASE)
    with patch.object(c.session, "send", side_effect=paypal.send):
        yield c


@pytest.fixture
def webprofile_server():
    return WebProfileServer()


@pytest.fixture
def webprofile_client(webprofile_server):
    c = Client("foo", "bar", API_BASE)
    with patch.object(c.session, "send", side_effect=webprofile_server.send):
        yield c
