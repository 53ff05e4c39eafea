from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from django.db import IntegrityError, models, transaction
from pymongo.errors import DuplicateKeyError

T = TypeVar("T", bound=models.Model)

SortSpec = Sequence[Tuple[str, int]]


class DuplicateRecordError(Exception):
    """Raised when a write collides with a uniqueness constraint of the store."""


class GenericRepository(Generic[T]):
    """Relational persistence over a single Django model."""

    def __init__(self, model: Type[T]):
        self.model = model

    @staticmethod
    def parse_id(raw: Any) -> Optional[int]:
        try:
            value = int(str(raw))
        except (TypeError, ValueError):
            return None
        return value if value > 0 else None

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.model.objects.filter(**filters)

    def create(self, **data) -> T:
        # Savepoint keeps an enclosing transaction usable after a constraint violation.
        try:
            with transaction.atomic():
                return self.model.objects.create(**data)
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc)) from exc

    def update(self, obj: T, **data) -> T:
        for k, v in data.items():
            setattr(obj, k, v)
        obj.save(update_fields=list(data.keys()))
        return obj

    def delete(self, obj: T):
        obj.delete()


class DocumentRepository:
    """Document persistence over a single MongoDB collection."""

    collection_name: str = ""

    def __init__(self, store):
        self.store = store
        self.collection = store.collection(self.collection_name)

    @staticmethod
    def parse_id(raw: Any) -> Optional[ObjectId]:
        if isinstance(raw, ObjectId):
            return raw
        try:
            return ObjectId(str(raw))
        except (InvalidId, TypeError):
            return None

    def find_one(self, query: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self.collection.find_one(dict(query))

    def find(
        self, query: Optional[Mapping[str, Any]] = None, sort: Optional[SortSpec] = None
    ) -> List[Dict[str, Any]]:
        cursor = self.collection.find(dict(query or {}))
        if sort:
            cursor = cursor.sort(list(sort))
        return list(cursor)

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise DuplicateRecordError(str(exc)) from exc
        return {**document, "_id": result.inserted_id}

    def set_fields(self, query: Mapping[str, Any], **fields: Any) -> None:
        self.collection.update_one(dict(query), {"$set": fields})

    def delete(self, query: Mapping[str, Any]) -> None:
        self.collection.delete_one(dict(query))
