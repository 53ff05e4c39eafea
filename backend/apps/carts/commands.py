from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class CartUpsertCommand:
    user_id: str
    goods_id: str
    quantity: int

    @staticmethod
    def from_validated(user_id: str, goods_id: str, data: Mapping[str, Any]):
        return CartUpsertCommand(
            user_id=str(user_id), goods_id=str(goods_id), quantity=data["quantity"]
        )
