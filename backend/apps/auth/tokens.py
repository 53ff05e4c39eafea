from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


class JWTTokenIssuer:
    """Issues signed access tokens that carry the user identifier claim."""

    token_class = AccessToken

    def issue(self, user_id: str) -> str:
        token = self.token_class()
        token[api_settings.USER_ID_CLAIM] = str(user_id)
        return str(token)

    def read_user_id(self, raw_token: str) -> str:
        """Verify ``raw_token`` and return its user id; raises TokenError when invalid."""
        return str(self.token_class(raw_token)[api_settings.USER_ID_CLAIM])
