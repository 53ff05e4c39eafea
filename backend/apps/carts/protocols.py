from __future__ import annotations

from typing import List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .dtos import CartLineRecord


class CartRepositoryProtocol(Protocol):
    def list_for_user(self, user_id: str) -> List["CartLineRecord"]:
        ...

    def get_line(self, user_id: str, goods_id: str) -> Optional["CartLineRecord"]:
        ...

    def create_line(self, user_id: str, goods_id: str, quantity: int) -> "CartLineRecord":
        ...

    def update_quantity(self, line: "CartLineRecord", quantity: int) -> "CartLineRecord":
        ...

    def delete_line(self, user_id: str, goods_id: str) -> None:
        ...
