from dataclasses import replace
from typing import List, Optional

from pymongo import ASCENDING

from apps.common.repository import DocumentRepository, GenericRepository
from .dtos import CartLineRecord
from .mappers import CartLineMapper
from .models import CartLine


class CartRepository(GenericRepository[CartLine]):
    def __init__(self):
        super().__init__(CartLine)

    def list_for_user(self, user_id: str) -> List[CartLineRecord]:
        lines = self.list(user_id=self.parse_id(user_id)).order_by("id")
        return [CartLineMapper.from_model(line) for line in lines]

    def get_line(self, user_id: str, goods_id: str) -> Optional[CartLineRecord]:
        line = self.get(user_id=self.parse_id(user_id), goods_id=self.parse_id(goods_id))
        return CartLineMapper.from_model(line) if line else None

    def create_line(self, user_id: str, goods_id: str, quantity: int) -> CartLineRecord:
        line = self.create(
            user_id=self.parse_id(user_id),
            goods_id=self.parse_id(goods_id),
            quantity=quantity,
        )
        return CartLineMapper.from_model(line)

    def update_quantity(self, line: CartLineRecord, quantity: int) -> CartLineRecord:
        self.model.objects.filter(id=self.parse_id(line.id)).update(quantity=quantity)
        return replace(line, quantity=quantity)

    def delete_line(self, user_id: str, goods_id: str) -> None:
        self.model.objects.filter(
            user_id=self.parse_id(user_id), goods_id=self.parse_id(goods_id)
        ).delete()


class MongoCartRepository(DocumentRepository):
    collection_name = "carts"

    def list_for_user(self, user_id: str) -> List[CartLineRecord]:
        docs = self.find({"userId": user_id}, sort=[("_id", ASCENDING)])
        return [CartLineMapper.from_document(d) for d in docs]

    def get_line(self, user_id: str, goods_id: str) -> Optional[CartLineRecord]:
        doc = self.find_one({"userId": user_id, "goodsId": goods_id})
        return CartLineMapper.from_document(doc) if doc else None

    def create_line(self, user_id: str, goods_id: str, quantity: int) -> CartLineRecord:
        doc = self.insert({"userId": user_id, "goodsId": goods_id, "quantity": quantity})
        return CartLineMapper.from_document(doc)

    def update_quantity(self, line: CartLineRecord, quantity: int) -> CartLineRecord:
        self.set_fields({"_id": self.parse_id(line.id)}, quantity=quantity)
        return replace(line, quantity=quantity)

    def delete_line(self, user_id: str, goods_id: str) -> None:
        self.delete({"userId": user_id, "goodsId": goods_id})
