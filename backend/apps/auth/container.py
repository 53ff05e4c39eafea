from __future__ import annotations

from apps.users.container import build_user_repository

from .credentials import DjangoPasswordHasher
from .services import LoginService, RegistrationService
from .tokens import JWTTokenIssuer


def build_registration_service() -> RegistrationService:
    return RegistrationService(
        users=build_user_repository(), hasher=DjangoPasswordHasher()
    )


def build_login_service() -> LoginService:
    return LoginService(
        users=build_user_repository(),
        hasher=DjangoPasswordHasher(),
        tokens=JWTTokenIssuer(),
    )
