from __future__ import annotations

from typing import List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .dtos import UserRecord


class UserRepositoryProtocol(Protocol):
    def get_by_id(self, user_id: str) -> Optional["UserRecord"]: ...

    def get_by_email(self, email: str) -> Optional["UserRecord"]: ...

    def find_by_email_or_nickname(self, email: str, nickname: str) -> List["UserRecord"]: ...

    def create_user(self, *, nickname: str, email: str, password: str) -> "UserRecord":
        """Persist a user; raises DuplicateRecordError on a uniqueness collision."""
        ...
