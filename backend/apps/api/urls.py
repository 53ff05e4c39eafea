from django.urls import path

from apps.auth.views import LoginView, RegisterView
from apps.carts.views import CartLineView, CartListView
from apps.goods.views import GoodsDetailView, GoodsListView
from apps.users.views import MeView

urlpatterns = [
    path("users", RegisterView.as_view(), name="api-users-register"),
    path("users/me", MeView.as_view(), name="api-users-me"),
    path("auth", LoginView.as_view(), name="api-auth-login"),
    path("goods", GoodsListView.as_view(), name="api-goods-list"),
    # Must precede the detail route so "cart" is not read as a goods id.
    path("goods/cart", CartListView.as_view(), name="api-cart-list"),
    path("goods/<str:goods_id>/cart", CartLineView.as_view(), name="api-cart-line"),
    path("goods/<str:goods_id>", GoodsDetailView.as_view(), name="api-goods-detail"),
]
