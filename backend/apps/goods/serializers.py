from rest_framework import serializers


class GoodsReadSerializer(serializers.Serializer):
    goodsId = serializers.CharField(source="id")
    name = serializers.CharField()
    thumbnailUrl = serializers.CharField(source="thumbnail_url", allow_blank=True)
    category = serializers.CharField()
    price = serializers.CharField()
    date = serializers.CharField()


class GoodsListResponseSerializer(serializers.Serializer):
    goods = GoodsReadSerializer(many=True)


class GoodsDetailResponseSerializer(serializers.Serializer):
    goods = GoodsReadSerializer()
