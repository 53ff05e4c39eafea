from __future__ import annotations

from typing import Protocol


class PasswordHasherProtocol(Protocol):
    """Credential-verification seam between the auth services and password storage."""

    def hash(self, raw_password: str) -> str: ...

    def verify(self, raw_password: str, encoded: str) -> bool: ...


class TokenIssuerProtocol(Protocol):
    def issue(self, user_id: str) -> str: ...
