from rest_framework import serializers

from apps.goods.serializers import GoodsReadSerializer

# Upper bound of the PositiveIntegerField column on every supported database.
MAX_QUANTITY = 2147483647


class CartQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)


class CartItemSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    goods = GoodsReadSerializer(allow_null=True)


class CartResponseSerializer(serializers.Serializer):
    cart = CartItemSerializer(many=True)
