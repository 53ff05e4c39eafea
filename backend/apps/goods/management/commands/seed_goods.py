from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.goods.container import build_goods_repository

GOODS = [
    ("Americano", "drink", 4100, "https://images.example.com/goods/americano.png"),
    ("Cafe Latte", "drink", 4600, "https://images.example.com/goods/cafe-latte.png"),
    ("Cold Brew", "drink", 4900, "https://images.example.com/goods/cold-brew.png"),
    ("Green Tea Latte", "drink", 5900, "https://images.example.com/goods/green-tea-latte.png"),
    ("Grapefruit Ade", "drink", 5700, "https://images.example.com/goods/grapefruit-ade.png"),
    ("Chocolate Cake", "food", 6500, "https://images.example.com/goods/chocolate-cake.png"),
    ("Bagel", "food", 3500, "https://images.example.com/goods/bagel.png"),
    ("Ham Cheese Sandwich", "food", 5800, "https://images.example.com/goods/ham-cheese-sandwich.png"),
    ("Croissant", "food", 3200, "https://images.example.com/goods/croissant.png"),
    ("Tumbler", "goods", 25000, "https://images.example.com/goods/tumbler.png"),
]


class Command(BaseCommand):
    help = "Seed the demo goods catalog into the configured store."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear", action="store_true", help="Delete existing goods before seeding"
        )

    def handle(self, *args, **options):
        repo = build_goods_repository()

        if options["clear"]:
            removed = repo.clear()
            self.stdout.write(f"Removed {removed} goods")

        # Stagger timestamps so the newest-first order follows the list order.
        now = timezone.now()
        for offset, (name, category, price, thumbnail) in enumerate(GOODS):
            repo.create_goods(
                name=name,
                category=category,
                price=price,
                thumbnail_url=thumbnail,
                date=now - timedelta(minutes=offset),
            )

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(GOODS)} goods"))
