from typing import List, Optional

from django.db.models import Q

from apps.common.repository import DocumentRepository, GenericRepository
from .dtos import UserRecord
from .mappers import UserMapper
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        pk = self.parse_id(user_id)
        if pk is None:
            return None
        user = self.get(id=pk)
        return UserMapper.from_model(user) if user else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        user = self.get(email=email)
        return UserMapper.from_model(user) if user else None

    def find_by_email_or_nickname(self, email: str, nickname: str) -> List[UserRecord]:
        users = self.model.objects.filter(Q(email=email) | Q(nickname=nickname))
        return [UserMapper.from_model(u) for u in users]

    def create_user(self, *, nickname: str, email: str, password: str) -> UserRecord:
        user = self.create(nickname=nickname, email=email, password=password)
        return UserMapper.from_model(user)


class MongoUserRepository(DocumentRepository):
    collection_name = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        oid = self.parse_id(user_id)
        if oid is None:
            return None
        doc = self.find_one({"_id": oid})
        return UserMapper.from_document(doc) if doc else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        doc = self.find_one({"email": email})
        return UserMapper.from_document(doc) if doc else None

    def find_by_email_or_nickname(self, email: str, nickname: str) -> List[UserRecord]:
        docs = self.find({"$or": [{"email": email}, {"nickname": nickname}]})
        return [UserMapper.from_document(d) for d in docs]

    def create_user(self, *, nickname: str, email: str, password: str) -> UserRecord:
        doc = self.insert({"nickname": nickname, "email": email, "password": password})
        return UserMapper.from_document(doc)
