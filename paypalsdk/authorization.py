"""
Authorizations created by payments with intent "authorize".
"""

from paypalsdk.types import Amount, Authorization, Capture

AUTHORIZATIONS_PATH = "/v1/payments/authorization"


class AuthorizationMixin:
    def get_authorization(self, authorization_id: str) -> Authorization:
        req = self.new_request(
            "GET", self.url(AUTHORIZATIONS_PATH, authorization_id)
        )
        return self.send_with_auth(req, Authorization)

    def capture_authorization(
        self, authorization_id: str, amount: Amount, is_final_capture: bool
    ) -> Capture:
        req = self.new_request(
            "POST",
            self.url(AUTHORIZATIONS_PATH, authorization_id, "capture"),
            {"amount": amount.to_payload(), "is_final_capture": is_final_capture},
        )
        return self.send_with_auth(req, Capture)

    def void_authorization(self, authorization_id: str) -> Authorization:
        req = self.new_request(
            "POST", self.url(AUTHORIZATIONS_PATH, authorization_id, "void")
        )
        return self.send_with_auth(req, Authorization)

    def reauthorize_authorization(
        self, authorization_id: str, amount: Amount
    ) -> Authorization:
        """Reauthorize an expired authorization, at most once per original authorization."""
        req = self.new_request(
            "POST",
            self.url(AUTHORIZATIONS_PATH, authorization_id, "reauthorize"),
            {"amount": amount.to_payload()},
        )
        return self.send_with_auth(req, Authorization)
