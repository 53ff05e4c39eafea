from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    errorMessage = serializers.CharField()
    details = serializers.JSONField(required=False)


class EmptyResponseSerializer(serializers.Serializer):
    """Successful mutations answer with an empty JSON object."""
