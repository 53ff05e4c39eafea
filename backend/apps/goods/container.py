from __future__ import annotations

from apps.common.storage import get_document_store, uses_document_store

from .protocols import GoodsRepositoryProtocol
from .repositories import GoodsRepository, MongoGoodsRepository
from .services import GoodsService


def build_goods_repository() -> GoodsRepositoryProtocol:
    if uses_document_store():
        return MongoGoodsRepository(get_document_store())
    return GoodsRepository()


def build_goods_service() -> GoodsService:
    return GoodsService(goods=build_goods_repository())
