import re

from rest_framework import serializers

_NICKNAME_PATTERN = re.compile(r"[A-Za-z0-9]+")
_PASSWORD_PATTERN = re.compile(r"[A-Za-z0-9]{4,30}")

NICKNAME_MIN_LENGTH = 3
NICKNAME_MAX_LENGTH = 30


def validate_nickname(value: str) -> str:
    """Nicknames are 3 to 30 ASCII letters or digits."""
    if value is None:
        raise serializers.ValidationError("Nickname is required.")
    if not NICKNAME_MIN_LENGTH <= len(value) <= NICKNAME_MAX_LENGTH:
        raise serializers.ValidationError(
            f"Nickname must be between {NICKNAME_MIN_LENGTH} and "
            f"{NICKNAME_MAX_LENGTH} characters long."
        )
    if not _NICKNAME_PATTERN.fullmatch(value):
        raise serializers.ValidationError(
            "Nickname may contain only letters and numbers."
        )
    return value


def validate_password(value: str) -> str:
    """Passwords are 4 to 30 ASCII letters or digits."""
    if value is None:
        raise serializers.ValidationError("Password is required.")
    if not _PASSWORD_PATTERN.fullmatch(value):
        raise serializers.ValidationError(
            "Password must be 4 to 30 letters or numbers."
        )
    return value
