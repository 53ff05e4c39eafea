from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings

from apps.common import get_logger
from apps.users.container import build_user_repository
from apps.users.dtos import UserDTO
from apps.users.mappers import UserMapper

logger = get_logger(__name__).bind(component="auth", layer="authentication")


class AuthenticatedUser:
    """Request-scoped user resolved from a bearer token; carries no password."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, profile: UserDTO):
        self.profile = profile

    @property
    def id(self) -> str:
        return self.profile.id

    @property
    def nickname(self) -> str:
        return self.profile.nickname

    @property
    def email(self) -> str:
        return self.profile.email

    def __str__(self):
        return self.profile.nickname


class BearerTokenAuthentication(JWTAuthentication):
    """
    Verifies ``Authorization: Bearer <token>`` and resolves the embedded user id
    through the configured user repository instead of Django's auth user model.
    A missing header leaves the request anonymous; a bad token or an unknown
    user fails authentication.
    """

    def __init__(self, *args, users=None, **kwargs):
        super().__init__(*args, **kwargs)
        self._users = users

    @property
    def users(self):
        if self._users is None:
            self._users = build_user_repository()
        return self._users

    def get_user(self, validated_token):
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            logger.warning("Token rejected: no user claim")
            raise InvalidToken(_("Token contained no recognizable user identification"))
        record = self.users.get_by_id(str(user_id))
        if record is None:
            logger.warning("Token rejected: user not found", user_id=user_id)
            raise AuthenticationFailed(_("User not found"), code="user_not_found")
        logger.debug("Authenticated user from bearer token", user_id=record.id)
        return AuthenticatedUser(UserMapper.to_dto(record))
