from typing import Any, Dict, Iterable, List, Mapping

from apps.goods.dtos import GoodsDTO
from .dtos import CartItemDTO, CartLineRecord
from .models import CartLine


class CartLineMapper:
    @staticmethod
    def from_model(line: CartLine) -> CartLineRecord:
        return CartLineRecord(
            id=str(line.id),
            user_id=str(line.user_id),
            goods_id=str(line.goods_id),
            quantity=line.quantity,
        )

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> CartLineRecord:
        return CartLineRecord(
            id=str(doc["_id"]),
            user_id=str(doc["userId"]),
            goods_id=str(doc["goodsId"]),
            quantity=int(doc["quantity"]),
        )


class CartItemMapper:
    @staticmethod
    def join(
        lines: Iterable[CartLineRecord], goods_by_id: Mapping[str, GoodsDTO]
    ) -> List[CartItemDTO]:
        """Pair each line with its goods, keeping the order of ``lines``."""
        return [
            CartItemDTO(quantity=line.quantity, goods=goods_by_id.get(line.goods_id))
            for line in lines
        ]

    @staticmethod
    def index_goods(goods: Iterable[GoodsDTO]) -> Dict[str, GoodsDTO]:
        return {g.id: g for g in goods}
