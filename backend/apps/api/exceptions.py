from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.http import Http404
from pymongo.errors import PyMongoError
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger
from apps.common import i18n
from apps.common.repository import DuplicateRecordError

logger = get_logger(__name__).bind(component="api", layer="exception")

PERSISTENCE_ERRORS = (DatabaseError, PyMongoError, DuplicateRecordError)
FORWARDED_HEADERS = ("WWW-Authenticate", "Allow", "Retry-After")


class ApplicationError(Exception):
    """
    Domain-level error raised from services or views.

    Args:
        code: Machine readable error code; selects the HTTP status.
        message: Human readable explanation shown to the client.
        status_code: Optional explicit HTTP status overriding the code mapping.
        details: Optional structured details for clients.
    """

    def __init__(
        self,
        code: str,
        message: Any,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(str(message))
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            headers=self.headers,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Central DRF exception handler producing the shared error body."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info("Handled application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    if isinstance(exc, PERSISTENCE_ERRORS):
        bound_logger.exception("Persistence failure", exception=exc.__class__.__name__)
        return error_response("PERSISTENCE_ERROR", i18n.REQUEST_FAILED)

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(getattr(exc, "message_dict", None) or list(exc.messages))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        i18n.SERVER_ERROR,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    if view:
        log = log.bind(view=type(view).__name__)
    return log.bind_request(context.get("request"))


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize_payload(exc, response.data, status_code)
    headers = {h: response[h] for h in FORWARDED_HEADERS if response.has_header(h)} or None
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    return error_response(code, message, details, http_status=status_code, headers=headers)


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, Any, Optional[Any]]:
    if isinstance(exc, (ValidationError, ParseError)):
        return ("VALIDATION_ERROR", i18n.INVALID_INPUT, payload)
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return ("UNAUTHORIZED", i18n.LOGIN_REQUIRED, None)
    if isinstance(exc, (NotFound, Http404)):
        return ("NOT_FOUND", i18n.NOT_FOUND, None)
    if isinstance(exc, MethodNotAllowed):
        return ("METHOD_NOT_ALLOWED", i18n.METHOD_NOT_ALLOWED, None)
    if status_code >= 500:
        return ("SERVER_ERROR", i18n.SERVER_ERROR, None)
    detail = payload.get("detail") if isinstance(payload, dict) else None
    return ("REQUEST_FAILED", detail if isinstance(detail, str) and detail else i18n.REQUEST_FAILED, None)


__all__ = ["ApplicationError", "global_exception_handler", "PERSISTENCE_ERRORS"]
