from rest_framework import serializers


class UserReadSerializer(serializers.Serializer):
    userId = serializers.CharField(source="id")
    nickname = serializers.CharField()
    email = serializers.EmailField()


class MeResponseSerializer(serializers.Serializer):
    user = UserReadSerializer()
