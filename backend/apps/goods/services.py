from __future__ import annotations

from typing import List, Optional

from apps.common import get_logger
from .dtos import GoodsDTO
from .protocols import GoodsRepositoryProtocol

logger = get_logger(__name__).bind(component="goods", layer="service")


class GoodsService:
    def __init__(self, goods: GoodsRepositoryProtocol):
        self.goods = goods
        self.logger = logger.bind(service="GoodsService")

    def list_goods(self, category: Optional[str] = None) -> List[GoodsDTO]:
        self.logger.debug("Listing goods", category=category)
        return self.goods.list_goods(category or None)

    def get_goods(self, goods_id: str) -> Optional[GoodsDTO]:
        self.logger.debug("Fetching goods", goods_id=goods_id)
        dto = self.goods.get_by_id(goods_id)
        if dto is None:
            self.logger.info("Goods not found", goods_id=goods_id)
        return dto
