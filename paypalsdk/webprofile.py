"""
Payment experience web profiles

CRUD over /v1/payment-experience/web-profiles. Profile names are validated by
PayPal; the only local check is that an update names the profile it replaces.
"""

from paypalsdk.errors import InvalidRequestError
from paypalsdk.types import WebProfile

WEB_PROFILES_PATH = "/v1/payment-experience/web-profiles"


class WebProfileMixin:
    def create_web_profile(self, wp: WebProfile) -> WebProfile:
        """Create a profile. The returned profile carries the id PayPal assigned."""
        req = self.new_request("POST", self.url(WEB_PROFILES_PATH), wp)
        return self.send_with_auth(req, WebProfile)

    def get_web_profile(self, profile_id: str) -> WebProfile:
        req = self.new_request("GET", self.url(WEB_PROFILES_PATH, profile_id))
        return self.send_with_auth(req, WebProfile)

    def get_web_profiles(self) -> list[WebProfile]:
        req = self.new_request("GET", self.url(WEB_PROFILES_PATH))
        return self.send_with_auth(req, list[WebProfile]) or []

    def set_web_profile(self, wp: WebProfile) -> None:
        """Replace a profile with `wp`; wp.id selects the profile."""
        if not wp.id:
            raise InvalidRequestError("no id specified for WebProfile")

        req = self.new_request("PUT", self.url(WEB_PROFILES_PATH, wp.id), wp)
        self.send_with_auth(req)

    def delete_web_profile(self, profile_id: str) -> None:
        req = self.new_request("DELETE", self.url(WEB_PROFILES_PATH, profile_id))
        self.send_with_auth(req)
