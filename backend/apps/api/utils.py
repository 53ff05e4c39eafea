from collections.abc import Mapping
from typing import Any, Dict, Optional

from django.utils.encoding import force_str
from django.utils.functional import Promise
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CONFLICT": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_400_BAD_REQUEST,
    "PERSISTENCE_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Mapping):
        return dict(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: Any,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the error body shared by every endpoint: ``{"errorMessage": ..., "details": ...}``.

    The machine-readable ``code`` only selects the HTTP status and is never sent
    to clients. ``message`` may be a lazy translation; it is rendered in the
    active language.
    """

    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, (str, Promise)):
        raise TypeError("error_response requires message to be a string")

    code = code.strip().upper()
    text = force_str(message).strip()
    if not code:
        raise ValueError("error_response requires a non-empty code")
    if not text:
        raise ValueError("error_response requires a non-empty message")

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(code, DEFAULT_ERROR_STATUS)
    )
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")
    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")

    payload: Dict[str, Any] = {"errorMessage": text}
    if details is not None:
        payload["details"] = _normalize_details(details)

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )
    return Response(payload, status=status_code, headers=headers_dict)


def empty_response(http_status: int = status.HTTP_200_OK) -> Response:
    return Response({}, status=http_status)
