from django.db import models
from django.utils import timezone


class Goods(models.Model):
    name = models.CharField(max_length=255)
    thumbnail_url = models.TextField(blank=True, default="")
    category = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "goods"
        verbose_name_plural = "goods"
        indexes = [
            models.Index(fields=["category", "-date"], name="goods_category_date_idx"),
        ]

    def __str__(self):
        return self.name
