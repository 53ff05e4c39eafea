from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RegisterCommand:
    nickname: str
    email: str
    password: str
    confirm_password: str

    @staticmethod
    def from_validated(data: Mapping[str, Any]) -> "RegisterCommand":
        return RegisterCommand(
            nickname=data["nickname"],
            email=data["email"],
            password=data["password"],
            confirm_password=data["confirmPassword"],
        )

    @property
    def passwords_match(self) -> bool:
        return self.password == self.confirm_password


@dataclass(frozen=True)
class LoginCommand:
    email: str
    password: str

    @staticmethod
    def from_validated(data: Mapping[str, Any]) -> "LoginCommand":
        return LoginCommand(email=data["email"], password=data["password"])
