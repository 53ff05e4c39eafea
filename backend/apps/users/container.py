from __future__ import annotations

from apps.common.storage import get_document_store, uses_document_store

from .protocols import UserRepositoryProtocol
from .repositories import MongoUserRepository, UserRepository


def build_user_repository() -> UserRepositoryProtocol:
    if uses_document_store():
        return MongoUserRepository(get_document_store())
    return UserRepository()
