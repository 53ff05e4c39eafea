from apps.goods.dtos import GoodsDTO


def make_goods(
    goods_id,
    name="Americano",
    category="drink",
    price="4100.00",
    date="2024-01-01T00:00:00+00:00",
    thumbnail_url=None,
):
    return GoodsDTO(
        id=str(goods_id),
        name=name,
        thumbnail_url=thumbnail_url or f"https://images.example.com/{goods_id}.png",
        category=category,
        price=price,
        date=date,
    )


class FakeGoodsRepository:
    def __init__(self, items=()):
        self.items = {g.id: g for g in items}
        self.batch_calls = []

    def normalize_id(self, raw):
        try:
            value = int(str(raw))
        except (TypeError, ValueError):
            return None
        return str(value) if value > 0 else None

    def list_goods(self, category=None):
        goods = [g for g in self.items.values() if category is None or g.category == category]
        return sorted(goods, key=lambda g: g.date, reverse=True)

    def get_by_id(self, goods_id):
        return self.items.get(str(goods_id))

    def list_by_ids(self, goods_ids):
        ids = list(goods_ids)
        self.batch_calls.append(ids)
        return [self.items[i] for i in ids if i in self.items]

    def create_goods(self, **data):
        goods = make_goods(len(self.items) + 1, **data)
        self.items[goods.id] = goods
        return goods

    def clear(self):
        count = len(self.items)
        self.items.clear()
        return count
