"""Storage backend selection and the MongoDB connection handle.

The relational variant relies on Django's own connection handling. The
document variant owns a :class:`DocumentStore` that is opened once when the
``common`` app becomes ready and closed at interpreter shutdown.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from django.apps import apps as django_apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pymongo import ASCENDING, DESCENDING, MongoClient

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="storage")

RELATIONAL = "relational"
DOCUMENT = "document"
BACKENDS = (RELATIONAL, DOCUMENT)

# collection name -> list of (keys, options)
DOCUMENT_INDEXES: Dict[str, list] = {
    "users": [
        ([("email", ASCENDING)], {"unique": True, "name": "users_email_uniq"}),
        ([("nickname", ASCENDING)], {"unique": True, "name": "users_nickname_uniq"}),
    ],
    "goods": [
        ([("category", ASCENDING), ("date", DESCENDING)], {"name": "goods_category_date"}),
    ],
    "carts": [
        (
            [("userId", ASCENDING), ("goodsId", ASCENDING)],
            {"unique": True, "name": "carts_user_goods_uniq"},
        ),
    ],
}


def storage_backend() -> str:
    backend = getattr(settings, "STORAGE_BACKEND", RELATIONAL) or RELATIONAL
    backend = backend.strip().lower()
    if backend not in BACKENDS:
        raise ImproperlyConfigured(
            f"STORAGE_BACKEND must be one of {', '.join(BACKENDS)}; got {backend!r}"
        )
    return backend


def uses_document_store() -> bool:
    return storage_backend() == DOCUMENT


class DocumentStore:
    def __init__(
        self,
        uri: str,
        database: str,
        *,
        client_factory: Callable[..., Any] = MongoClient,
        timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.database_name = database
        self._client_factory = client_factory
        self._timeout_ms = timeout_ms
        self._client = None
        self._db = None
        self.logger = logger.bind(database=database)

    @classmethod
    def from_settings(cls) -> "DocumentStore":
        return cls(
            getattr(settings, "MONGO_URI", "mongodb://localhost:27017"),
            getattr(settings, "MONGO_DB", "shopping-demo"),
        )

    @property
    def is_open(self) -> bool:
        return self._db is not None

    def open(self) -> "DocumentStore":
        if self.is_open:
            return self
        self._client = self._client_factory(
            self.uri, serverSelectionTimeoutMS=self._timeout_ms
        )
        self._db = self._client[self.database_name]
        self.logger.info("Document store opened")
        return self

    def ensure_indexes(self) -> None:
        for name, indexes in DOCUMENT_INDEXES.items():
            for keys, options in indexes:
                self.collection(name).create_index(keys, **options)
        self.logger.debug("Document store indexes ensured")

    def collection(self, name: str):
        if self._db is None:
            raise RuntimeError("Document store is not open")
        return self._db[name]

    def ping(self) -> bool:
        if self._client is None:
            return False
        self._client.admin.command("ping")
        return True

    def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._db = None
        self.logger.info("Document store closed")


def get_document_store() -> DocumentStore:
    store: Optional[DocumentStore] = getattr(
        django_apps.get_app_config("common"), "document_store", None
    )
    if store is None:
        raise ImproperlyConfigured(
            "Document store requested but STORAGE_BACKEND is not 'document'"
        )
    return store
