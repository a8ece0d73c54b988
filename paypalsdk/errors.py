"""
PayPal client errors

Local errors (bad configuration, bad input, undecodable bodies) and remote
errors (any non-2xx response) all derive from PayPalError.
"""

from typing import Optional

from paypalsdk.types import ErrorResponse, ErrorResponseDetail


class PayPalError(Exception):
    pass


class ConfigurationError(PayPalError):
    pass


class InvalidRequestError(PayPalError):
    pass


class DecodeError(PayPalError):
    """Response body could not be decoded as JSON."""

    def __init__(self, message: str, body: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class APIError(PayPalError):
    """
    Non-2xx response from the PayPal API.

    Args:
        status_code: HTTP status of the response
        method: HTTP method of the request that failed
        url: Full URL of the request that failed
        response: Decoded error envelope
    """

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        response: ErrorResponse | None = None,
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response = response or ErrorResponse()
        super().__init__(str(self))

    @property
    def name(self) -> str | None:
        return self.response.name

    @property
    def message(self) -> str | None:
        return self.response.message

    @property
    def debug_id(self) -> str | None:
        return self.response.debug_id

    @property
    def details(self) -> list[ErrorResponseDetail]:
        return self.response.details or []

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message or ''}".rstrip()
