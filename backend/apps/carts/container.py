from __future__ import annotations

from apps.common.storage import get_document_store, uses_document_store
from apps.goods.container import build_goods_repository

from .protocols import CartRepositoryProtocol
from .repositories import CartRepository, MongoCartRepository
from .services import CartService


def build_cart_repository() -> CartRepositoryProtocol:
    if uses_document_store():
        return MongoCartRepository(get_document_store())
    return CartRepository()


def build_cart_service() -> CartService:
    return CartService(carts=build_cart_repository(), goods=build_goods_repository())
