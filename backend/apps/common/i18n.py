"""User-facing messages, declared once so makemessages can extract them."""
from django.utils.translation import gettext_lazy as _

INVALID_SIGNUP_FORMAT = _("The submitted data has an invalid format.")
PASSWORD_MISMATCH = _("The password does not match the password confirmation.")
ACCOUNT_EXISTS = _("An account with this email or nickname already exists.")
INVALID_LOGIN_FORMAT = _("The data format is invalid.")
INVALID_CREDENTIALS = _("The email or password is incorrect.")
LOGIN_REQUIRED = _("Please log in to use this feature.")
INVALID_GOODS_ID = _("The goods identifier is invalid.")
INVALID_INPUT = _("Invalid input")
REQUEST_FAILED = _("The request could not be processed.")
SERVER_ERROR = _("Something went wrong")
METHOD_NOT_ALLOWED = _("Method not allowed")
NOT_FOUND = _("Resource not found")

__all__ = [
    "INVALID_SIGNUP_FORMAT",
    "PASSWORD_MISMATCH",
    "ACCOUNT_EXISTS",
    "INVALID_LOGIN_FORMAT",
    "INVALID_CREDENTIALS",
    "LOGIN_REQUIRED",
    "INVALID_GOODS_ID",
    "INVALID_INPUT",
    "REQUEST_FAILED",
    "SERVER_ERROR",
    "METHOD_NOT_ALLOWED",
    "NOT_FOUND",
]
