from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List

from .dtos import GoodsDTO
from .models import Goods

_CENTS = Decimal("0.01")


def format_price(value: Any) -> str:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return str(value)
    return format(amount.quantize(_CENTS), "f")


def _format_date(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value) if value is not None else ""


class GoodsMapper:
    @staticmethod
    def from_model(goods: Goods) -> GoodsDTO:
        return GoodsDTO(
            id=str(goods.id),
            name=goods.name,
            thumbnail_url=goods.thumbnail_url,
            category=goods.category,
            price=format_price(goods.price),
            date=_format_date(goods.date),
        )

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> GoodsDTO:
        return GoodsDTO(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            thumbnail_url=doc.get("thumbnailUrl", ""),
            category=doc.get("category", ""),
            price=format_price(doc.get("price", 0)),
            date=_format_date(doc.get("date")),
        )

    @staticmethod
    def many_from_models(items: Iterable[Goods]) -> List[GoodsDTO]:
        return [GoodsMapper.from_model(g) for g in items]

    @staticmethod
    def many_from_documents(docs: Iterable[Dict[str, Any]]) -> List[GoodsDTO]:
        return [GoodsMapper.from_document(d) for d in docs]
