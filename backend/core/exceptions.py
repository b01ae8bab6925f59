"""
FilmRate exception hierarchy and the DRF exception handler.

Services raise these; views translate them into envelope responses, and
anything that escapes a view is rendered by ``api_exception_handler``.
"""
import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.views import exception_handler

from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class BaseAPIException(APIException):
    """Root of every FilmRate error. ``extra_data`` ends up under ``errors``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("Something went wrong.")
    default_code = "error"

    def __init__(
        self,
        detail: Optional[str] = None,
        code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None,
    ):
        self.extra_data = extra_data or {}
        super().__init__(detail or self.default_detail, code or self.default_code)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.default_code}: {self.detail}"


class ClientErrorException(BaseAPIException):
    """4xx family."""


# 400
class ValidationException(ClientErrorException):
    """
    Input rejected by a service.

    ``field_errors`` maps field names to lists of messages, matching the
    shape of serializer errors.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("Invalid input.")
    default_code = "validation_error"

    def __init__(self, detail=None, field_errors: Optional[Dict] = None, **kwargs):
        self.field_errors = field_errors or {}
        if field_errors:
            kwargs["extra_data"] = {"field_errors": field_errors}
        super().__init__(detail, **kwargs)


# 401
class AuthenticationException(ClientErrorException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _("Authentication failed.")
    default_code = "authentication_failed"


class InvalidCredentialsException(AuthenticationException):
    default_detail = _("Invalid email or password")
    default_code = "invalid_credentials"


class TokenInvalidException(AuthenticationException):
    default_detail = _("Invalid or expired token")
    default_code = "token_invalid"


# 403
class PermissionException(ClientErrorException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("You are not allowed to do that.")
    default_code = "permission_denied"


class AccountSuspendedException(PermissionException):
    default_detail = _("Your account has been deactivated")
    default_code = "account_deactivated"


# 404
class ResourceException(ClientErrorException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _("Not found.")
    default_code = "not_found"


class NotFoundException(ResourceException):
    pass


class UserNotFoundException(ResourceException):
    default_detail = _("User not found")
    default_code = "user_not_found"


class MovieNotFoundException(ResourceException):
    default_detail = _("Movie not found")
    default_code = "movie_not_found"


class ReviewNotFoundException(ResourceException):
    default_detail = _("Review not found")
    default_code = "review_not_found"


class ListNotFoundException(ResourceException):
    default_detail = _("List not found")
    default_code = "list_not_found"


# 409
class ConflictException(ClientErrorException):
    """A write collided with an existing unique row."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = _("Already exists.")
    default_code = "conflict"


# 500
class DatabaseException(BaseAPIException):
    """Unexpected store failure, wrapped with a description of the operation."""

    default_detail = _("Database operation failed.")
    default_code = "database_error"


def api_exception_handler(exc, context):
    """
    ``EXCEPTION_HANDLER`` for DRF.

    Renders authentication, permission, throttling and FilmRate errors in
    the response envelope and keeps DRF's headers (``WWW-Authenticate``,
    ``Retry-After``). Exceptions DRF does not know become a logged 500.
    """
    from .responses import APIResponse

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}"
        )
        return APIResponse.server_error()

    if isinstance(exc, BaseAPIException):
        message = str(exc.detail)
        errors = exc.extra_data or None
    elif isinstance(exc, DRFValidationError):
        message = _("Validation failed")
        errors = {"field_errors": response.data}
    else:
        data = response.data
        message = data.get("detail", _("Request failed")) if isinstance(data, dict) else data
        errors = None

    envelope = APIResponse.error(
        message=message, errors=errors, status_code=response.status_code
    )

    for header, value in response.items():
        if header.lower() != "content-type":
            envelope[header] = value

    return envelope
