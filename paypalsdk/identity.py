"""
Log In with PayPal (OpenID Connect)

Exchange authorization codes and refresh tokens for user tokens, and read the
user's profile claims.
"""

from paypalsdk.types import TokenResponse, UserInfo

TOKEN_SERVICE_PATH = "/v1/identity/openidconnect/tokenservice"
USERINFO_PATH = "/v1/identity/openidconnect/userinfo/"


class IdentityMixin:
    def grant_new_access_token_from_auth_code(
        self, code: str, redirect_uri: str
    ) -> TokenResponse:
        req = self.new_request(
            "POST",
            self.url(TOKEN_SERVICE_PATH),
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
        )
        return self.send_with_basic_auth(req, TokenResponse, required=True)

    def grant_new_access_token_from_refresh_token(
        self, refresh_token: str
    ) -> TokenResponse:
        req = self.new_request(
            "POST",
            self.url(TOKEN_SERVICE_PATH),
            data={"grant_type": "refresh_token", "refresh_token": refresh_token},
        )
        return self.send_with_basic_auth(req, TokenResponse, required=True)

    def get_user_info(self, schema: str = "openid") -> UserInfo:
        req = self.new_request(
            "GET", self.url(USERINFO_PATH), params={"schema": schema}
        )
        return self.send_with_auth(req, UserInfo)
