from __future__ import annotations

from typing import Any, List, Optional, Tuple

from apps.common import get_logger
from apps.common import i18n
from apps.common.repository import DuplicateRecordError
from apps.goods.protocols import GoodsRepositoryProtocol
from .commands import CartUpsertCommand
from .dtos import CartItemDTO, CartLineRecord
from .mappers import CartItemMapper
from .protocols import CartRepositoryProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")

ServiceError = Tuple[str, Any, Optional[Any]]


class CartService:
    def __init__(self, carts: CartRepositoryProtocol, goods: GoodsRepositoryProtocol):
        self.carts = carts
        self.goods = goods
        self.logger = logger.bind(service="CartService")

    def list_cart(self, user_id: str) -> List[CartItemDTO]:
        lines = self.carts.list_for_user(user_id)
        if not lines:
            return []
        goods = self.goods.list_by_ids({line.goods_id for line in lines})
        items = CartItemMapper.join(lines, CartItemMapper.index_goods(goods))
        missing = sum(1 for item in items if item.goods is None)
        if missing:
            self.logger.warning(
                "Cart references goods that no longer exist",
                user_id=user_id,
                missing=missing,
            )
        self.logger.debug("Listing cart", user_id=user_id, lines=len(items))
        return items

    def upsert(
        self, command: CartUpsertCommand
    ) -> Tuple[Optional[CartLineRecord], Optional[ServiceError]]:
        goods_id = self.goods.normalize_id(command.goods_id)
        if goods_id is None:
            self.logger.info(
                "Cart upsert rejected: malformed goods id",
                user_id=command.user_id,
                goods_id=command.goods_id,
            )
            return None, (
                "VALIDATION_ERROR",
                i18n.INVALID_GOODS_ID,
                {"goodsId": command.goods_id},
            )
        line = self.carts.get_line(command.user_id, goods_id)
        if line is not None:
            self.logger.debug(
                "Overwriting cart quantity",
                user_id=command.user_id,
                goods_id=goods_id,
                quantity=command.quantity,
            )
            return self.carts.update_quantity(line, command.quantity), None
        try:
            line = self.carts.create_line(command.user_id, goods_id, command.quantity)
        except DuplicateRecordError:
            # A concurrent request created the line first; overwrite its quantity.
            line = self.carts.get_line(command.user_id, goods_id)
            if line is None:
                raise
            self.logger.info(
                "Cart line created concurrently, overwriting",
                user_id=command.user_id,
                goods_id=goods_id,
            )
            return self.carts.update_quantity(line, command.quantity), None
        self.logger.info(
            "Cart line created",
            user_id=command.user_id,
            goods_id=goods_id,
            quantity=command.quantity,
        )
        return line, None

    def remove(self, user_id: str, raw_goods_id: str) -> None:
        goods_id = self.goods.normalize_id(raw_goods_id)
        if goods_id is None:
            self.logger.debug(
                "Ignoring removal of malformed goods id",
                user_id=user_id,
                goods_id=raw_goods_id,
            )
            return
        self.carts.delete_line(user_id, goods_id)
        self.logger.info("Cart line removed", user_id=user_id, goods_id=goods_id)
