from rest_framework import serializers

from apps.users.validators import (
    validate_nickname as validate_nickname_rules,
    validate_password as validate_password_rules,
)


class RegisterRequestSerializer(serializers.Serializer):
    nickname = serializers.CharField(trim_whitespace=False)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    confirmPassword = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_nickname(self, value: str) -> str:
        return validate_nickname_rules(value)

    def validate_password(self, value: str) -> str:
        return validate_password_rules(value)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_password(self, value: str) -> str:
        return validate_password_rules(value)


class TokenResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
