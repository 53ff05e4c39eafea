from __future__ import annotations

from typing import Any, Optional, Tuple

from apps.common import get_logger
from apps.common import i18n
from apps.common.repository import DuplicateRecordError
from apps.users.dtos import UserDTO
from apps.users.mappers import UserMapper
from apps.users.protocols import UserRepositoryProtocol
from .commands import LoginCommand, RegisterCommand
from .protocols import PasswordHasherProtocol, TokenIssuerProtocol

logger = get_logger(__name__).bind(component="auth", layer="service")

ServiceError = Tuple[str, Any, Optional[Any]]


class RegistrationService:
    def __init__(self, users: UserRepositoryProtocol, hasher: PasswordHasherProtocol):
        self.users = users
        self.hasher = hasher
        self.logger = logger.bind(service="RegistrationService")

    def _conflict(self, command: RegisterCommand, reason: str) -> ServiceError:
        self.logger.info(
            "Registration rejected: account exists",
            nickname=command.nickname,
            email=command.email,
            reason=reason,
        )
        return ("CONFLICT", i18n.ACCOUNT_EXISTS, None)

    def register(
        self, command: RegisterCommand
    ) -> Tuple[Optional[UserDTO], Optional[ServiceError]]:
        self.logger.debug(
            "Received registration request",
            nickname=command.nickname,
            email=command.email,
        )
        if not command.passwords_match:
            self.logger.info(
                "Registration rejected: password confirmation mismatch",
                nickname=command.nickname,
            )
            return None, ("VALIDATION_ERROR", i18n.PASSWORD_MISMATCH, None)
        if self.users.find_by_email_or_nickname(command.email, command.nickname):
            return None, self._conflict(command, "lookup")
        try:
            record = self.users.create_user(
                nickname=command.nickname,
                email=command.email,
                password=self.hasher.hash(command.password),
            )
        except DuplicateRecordError:
            # Lost a race against a concurrent registration for the same account.
            return None, self._conflict(command, "unique_constraint")
        self.logger.info(
            "User registered successfully", user_id=record.id, nickname=record.nickname
        )
        return UserMapper.to_dto(record), None


class LoginService:
    def __init__(
        self,
        users: UserRepositoryProtocol,
        hasher: PasswordHasherProtocol,
        tokens: TokenIssuerProtocol,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens
        self.logger = logger.bind(service="LoginService")

    def login(
        self, command: LoginCommand
    ) -> Tuple[Optional[str], Optional[ServiceError]]:
        record = self.users.get_by_email(command.email)
        if record is None:
            # Hash anyway so unknown emails cost the same as wrong passwords.
            self.hasher.hash(command.password)
            self.logger.info("Login rejected: unknown email", email=command.email)
            return None, ("INVALID_CREDENTIALS", i18n.INVALID_CREDENTIALS, None)
        if not self.hasher.verify(command.password, record.password):
            self.logger.info("Login rejected: wrong password", user_id=record.id)
            return None, ("INVALID_CREDENTIALS", i18n.INVALID_CREDENTIALS, None)
        token = self.tokens.issue(record.id)
        self.logger.info("User logged in", user_id=record.id)
        return token, None
