from django.apps import AppConfig


class GoodsConfig(AppConfig):
    name = "apps.goods"
    verbose_name = "Goods"
