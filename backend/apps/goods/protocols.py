from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .dtos import GoodsDTO


class GoodsRepositoryProtocol(Protocol):
    def normalize_id(self, raw: Any) -> Optional[str]:
        """Canonical string form of a goods identifier, or None when malformed."""
        ...

    def list_goods(self, category: Optional[str] = None) -> List["GoodsDTO"]: ...

    def get_by_id(self, goods_id: str) -> Optional["GoodsDTO"]: ...

    def list_by_ids(self, goods_ids: Iterable[str]) -> List["GoodsDTO"]: ...

    def create_goods(self, **data: Any) -> "GoodsDTO": ...

    def clear(self) -> int: ...
