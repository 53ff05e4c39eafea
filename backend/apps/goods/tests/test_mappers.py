from datetime import datetime, timezone
from decimal import Decimal

from bson import ObjectId

from apps.goods.mappers import GoodsMapper, format_price


def test_format_price_always_has_two_decimals():
    assert format_price(Decimal("4100")) == "4100.00"
    assert format_price(9.9) == "9.90"
    assert format_price(3) == "3.00"


def test_from_document_maps_camel_case_fields():
    oid = ObjectId()
    when = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    dto = GoodsMapper.from_document(
        {
            "_id": oid,
            "name": "Cold Brew",
            "thumbnailUrl": "https://images.example.com/cold-brew.png",
            "category": "drink",
            "price": 4900,
            "date": when,
        }
    )
    assert dto.id == str(oid)
    assert dto.thumbnail_url.endswith("cold-brew.png")
    assert dto.price == "4900.00"
    assert dto.date == when.isoformat()
