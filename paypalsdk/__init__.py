"""
paypalsdk - client for the PayPal REST API.
"""

from paypalsdk.client import Client
from paypalsdk.core.settings import API_BASE_LIVE, API_BASE_SANDBOX, Settings
from paypalsdk.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    InvalidRequestError,
    PayPalError,
)

__all__ = [
    "API_BASE_LIVE",
    "API_BASE_SANDBOX",
    "APIError",
    "Client",
    "ConfigurationError",
    "DecodeError",
    "InvalidRequestError",
    "PayPalError",
    "Settings",
]
