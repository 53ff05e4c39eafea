from typing import Any, Iterable, List, Optional

from pymongo import DESCENDING

from apps.common.repository import DocumentRepository, GenericRepository
from .dtos import GoodsDTO
from .mappers import GoodsMapper
from .models import Goods


class GoodsRepository(GenericRepository[Goods]):
    def __init__(self):
        super().__init__(Goods)

    def normalize_id(self, raw: Any) -> Optional[str]:
        pk = self.parse_id(raw)
        return str(pk) if pk is not None else None

    def list_goods(self, category: Optional[str] = None) -> List[GoodsDTO]:
        qs = self.list(category=category) if category else self.model.objects.all()
        return GoodsMapper.many_from_models(qs.order_by("-date", "-id"))

    def get_by_id(self, goods_id: str) -> Optional[GoodsDTO]:
        pk = self.parse_id(goods_id)
        if pk is None:
            return None
        goods = self.get(id=pk)
        return GoodsMapper.from_model(goods) if goods else None

    def list_by_ids(self, goods_ids: Iterable[str]) -> List[GoodsDTO]:
        pks = {pk for pk in (self.parse_id(g) for g in goods_ids) if pk is not None}
        if not pks:
            return []
        return GoodsMapper.many_from_models(self.list(id__in=pks))

    def create_goods(self, **data: Any) -> GoodsDTO:
        return GoodsMapper.from_model(self.create(**data))

    def clear(self) -> int:
        deleted, _ = self.model.objects.all().delete()
        return deleted


class MongoGoodsRepository(DocumentRepository):
    collection_name = "goods"
    _sort = [("date", DESCENDING), ("_id", DESCENDING)]

    def normalize_id(self, raw: Any) -> Optional[str]:
        oid = self.parse_id(raw)
        return str(oid) if oid is not None else None

    def list_goods(self, category: Optional[str] = None) -> List[GoodsDTO]:
        query = {"category": category} if category else {}
        return GoodsMapper.many_from_documents(self.find(query, sort=self._sort))

    def get_by_id(self, goods_id: str) -> Optional[GoodsDTO]:
        oid = self.parse_id(goods_id)
        if oid is None:
            return None
        doc = self.find_one({"_id": oid})
        return GoodsMapper.from_document(doc) if doc else None

    def list_by_ids(self, goods_ids: Iterable[str]) -> List[GoodsDTO]:
        oids = {oid for oid in (self.parse_id(g) for g in goods_ids) if oid is not None}
        if not oids:
            return []
        return GoodsMapper.many_from_documents(self.find({"_id": {"$in": list(oids)}}))

    def create_goods(self, **data: Any) -> GoodsDTO:
        doc = {
            "name": data["name"],
            "thumbnailUrl": data.get("thumbnail_url", ""),
            "category": data["category"],
            "price": float(data["price"]),
            "date": data["date"],
        }
        return GoodsMapper.from_document(self.insert(doc))

    def clear(self) -> int:
        return self.collection.delete_many({}).deleted_count
