"""DTO dataclasses only. Mapping logic lives in mappers.py."""
from dataclasses import dataclass


@dataclass
class UserRecord:
    """Stored user as seen by services, including the password hash."""

    id: str
    nickname: str
    email: str
    password: str


@dataclass
class UserDTO:
    id: str
    nickname: str
    email: str
