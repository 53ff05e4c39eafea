from django.apps import AppConfig


class CartsConfig(AppConfig):
    name = "apps.carts"
    verbose_name = "Carts"
