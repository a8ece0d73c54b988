"""
PayPal REST Client

This module owns the credential and token lifecycle and the request pipeline
every resource operation goes through:
- Building requests (JSON or form bodies)
- Fetching and refreshing the OAuth2 bearer token
- Sending requests and decoding responses into typed models
- Raising typed errors for non-2xx responses
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any, Optional
from urllib.parse import quote

import requests
import structlog
from pydantic import TypeAdapter, ValidationError

from paypalsdk.authorization import AuthorizationMixin
from paypalsdk.capture import CaptureMixin
from paypalsdk.core.logging import ClientEvents
from paypalsdk.core.settings import Settings
from paypalsdk.errors import APIError, ConfigurationError, DecodeError
from paypalsdk.identity import IdentityMixin
from paypalsdk.order import OrderMixin
from paypalsdk.payment import PaymentMixin
from paypalsdk.payout import PayoutMixin
from paypalsdk.sale import SaleMixin
from paypalsdk.types import ErrorResponse, PayPalModel, TokenResponse
from paypalsdk.webprofile import WebProfileMixin

# Emits through stdlib logging, so its level threshold applies
log = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

# Tokens this close to expiry are replaced before use
REQUEST_NEW_TOKEN_BEFORE_EXPIRES_IN = timedelta(seconds=60)

DEFAULT_TIMEOUT = 30.0


class Client(
    WebProfileMixin,
    PaymentMixin,
    SaleMixin,
    AuthorizationMixin,
    CaptureMixin,
    OrderMixin,
    PayoutMixin,
    IdentityMixin,
):
    def __init__(
        self,
        client_id: str,
        secret: str,
        api_base: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client. No token is requested until the first
        authenticated call.

        Args:
            client_id: PayPal REST application client ID
            secret: PayPal REST application secret
            api_base: API host, e.g. API_BASE_SANDBOX or API_BASE_LIVE
            session: Optional requests session to send through
            timeout: Per-request timeout in seconds
        """
        if not client_id or not secret or not api_base:
            raise ConfigurationError(
                "client_id, secret and api_base are required to create a Client"
            )

        self.client_id = client_id
        self.secret = secret
        self.api_base = api_base.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

        self.token: TokenResponse | None = None
        self.token_expires_at: datetime | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Client":
        return cls(
            settings.PAYPAL_CLIENT_ID,
            settings.PAYPAL_SECRET,
            settings.PAYPAL_BASE,
            timeout=settings.PAYPAL_TIMEOUT,
            **kwargs,
        )

    def url(self, path: str, *segments: str) -> str:
        """Join the API base, a fixed path and quoted path segments (ids, actions)."""
        parts = [path, *(quote(str(s), safe="") for s in segments)]
        return self.api_base + "/".join(parts)

    # Tokens

    def get_access_token(self) -> TokenResponse:
        """Request a client-credentials token and cache it on the client."""
        req = self.new_request(
            "POST",
            self.url("/v1/oauth2/token"),
            data={"grant_type": "client_credentials"},
        )
        token = self.send_with_basic_auth(req, TokenResponse, required=True)

        self.token = token
        if token.expires_in is not None:
            self.token_expires_at = datetime.now(UTC) + timedelta(
                seconds=token.expires_in
            )
        else:
            self.token_expires_at = None

        log.info(
            ClientEvents.TOKEN_REFRESHED,
            api_base=self.api_base,
            expires_at=self.token_expires_at.isoformat()
            if self.token_expires_at
            else None,
        )
        return token

    def set_access_token(self, token: str) -> None:
        """Use a token obtained elsewhere. It has no known expiry and is never refreshed."""
        self.token = TokenResponse(access_token=token)
        self.token_expires_at = None

    def _token_is_stale(self) -> bool:
        if self.token is None:
            return True
        if self.token_expires_at is None:
            return False
        return self.token_expires_at - datetime.now(UTC) < REQUEST_NEW_TOKEN_BEFORE_EXPIRES_IN

    # Requests

    def new_request(
        self,
        method: str,
        url: str,
        payload: PayPalModel | dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> requests.Request:
        """
        Build a request. `payload` is sent as JSON, `data` as a form body and
        `params` as the query string.
        """
        if isinstance(payload, PayPalModel):
            payload = payload.to_payload()
        return requests.Request(method, url, json=payload, data=data, params=params)

    def send_with_auth(self, req: requests.Request, result_type: Any = None) -> Any:
        """Send with the bearer token, fetching a fresh one when needed."""
        if self._token_is_stale():
            self.get_access_token()

        req.headers["Authorization"] = f"Bearer {self.token.access_token}"
        return self.send(req, result_type)

    def send_with_basic_auth(
        self, req: requests.Request, result_type: Any = None, required: bool = False
    ) -> Any:
        """Send with the client ID and secret as HTTP basic credentials."""
        req.auth = (self.client_id, self.secret)
        return self.send(req, result_type, required)

    def send(
        self, req: requests.Request, result_type: Any = None, required: bool = False
    ) -> Any:
        """
        Send a request and decode the response.

        Args:
            req: Request built by new_request
            result_type: Model class (or list[Model]) for the 2xx body, or
                None when no body is expected
            required: Treat an empty 2xx body as a decode error

        Returns:
            The decoded body, or None for empty bodies (unless required) and
            result_type=None

        Raises:
            APIError: on non-2xx responses
            DecodeError: when a body is not valid JSON for the expected type
        """
        prepared = self.session.prepare_request(req)
        prepared.headers.setdefault("Content-Type", "application/json")
        prepared.headers["Accept"] = "application/json"
        prepared.headers["Accept-Language"] = "en_US"

        log.debug(ClientEvents.REQUEST, method=prepared.method, url=prepared.url)
        resp = self.session.send(prepared, timeout=self.timeout)
        log.debug(
            ClientEvents.RESPONSE,
            method=prepared.method,
            url=prepared.url,
            status_code=resp.status_code,
        )

        if resp.status_code < 200 or resp.status_code > 299:
            raise self._error_from_response(prepared, resp)

        if result_type is None:
            return None
        if not resp.content:
            if required:
                raise DecodeError(
                    f"empty response body from {prepared.method} {prepared.url}",
                    status_code=resp.status_code,
                )
            return None

        return self._decode(resp, result_type)

    def _decode(self, resp: Any, result_type: Any) -> Any:
        try:
            return TypeAdapter(result_type).validate_python(resp.json())
        except (ValueError, ValidationError) as e:
            log.error(
                ClientEvents.DECODE_ERROR,
                status_code=resp.status_code,
                error=str(e),
            )
            raise DecodeError(
                f"could not decode response body: {e}",
                body=resp.text,
                status_code=resp.status_code,
            ) from e

    def _error_from_response(self, prepared: requests.PreparedRequest, resp: Any) -> Exception:
        body = ErrorResponse()
        if resp.content:
            body = self._decode(resp, ErrorResponse)

        err = APIError(resp.status_code, prepared.method, prepared.url, body)
        log.warning(
            ClientEvents.API_ERROR,
            method=prepared.method,
            url=prepared.url,
            status_code=resp.status_code,
            name=err.name,
            debug_id=err.debug_id,
        )
        return err
