from typing import Any, Dict

from .dtos import UserDTO, UserRecord
from .models import User


class UserMapper:
    @staticmethod
    def from_model(user: User) -> UserRecord:
        return UserRecord(
            id=str(user.id),
            nickname=user.nickname,
            email=user.email,
            password=user.password,
        )

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(doc["_id"]),
            nickname=doc["nickname"],
            email=doc["email"],
            password=doc.get("password", ""),
        )

    @staticmethod
    def to_dto(record: UserRecord) -> UserDTO:
        return UserDTO(id=record.id, nickname=record.nickname, email=record.email)
