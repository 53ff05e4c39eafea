from dataclasses import dataclass
from typing import Optional

from apps.goods.dtos import GoodsDTO


@dataclass
class CartLineRecord:
    id: str
    user_id: str
    goods_id: str
    quantity: int


@dataclass
class CartItemDTO:
    quantity: int
    goods: Optional[GoodsDTO]
"""DTO dataclasses only. Mapping logic lives in mappers.py."""
