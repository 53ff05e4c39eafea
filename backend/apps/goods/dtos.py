"""DTO dataclasses only. Mapping logic lives in mappers.py."""
from dataclasses import dataclass


@dataclass
class GoodsDTO:
    id: str
    name: str
    thumbnail_url: str
    category: str
    price: str
    date: str
