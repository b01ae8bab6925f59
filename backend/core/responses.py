"""
Response envelope used by every FilmRate endpoint.

Every body has the shape::

    {"success": bool, "message": str, "data"?: ..., "errors"?: ..., "timestamp": iso8601}
"""

from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.response import Response

from django.utils import timezone


class APIResponse:
    """
    Builders for the standard envelope.

    Usage:
        return APIResponse.success("Movie found", {"movie": data})
        return APIResponse.paginated(Messages.SUCCESS, "movies", items, pagination)
        return APIResponse.not_found(str(e.detail))
    """

    @staticmethod
    def _base_response(
        success: bool,
        message: str,
        data: Any = None,
        errors: Any = None,
        status_code: int = status.HTTP_200_OK,
    ) -> Response:
        body = {"success": success, "message": str(message)}

        if success and data is not None:
            body["data"] = data
        if not success and errors is not None:
            body["errors"] = errors

        body["timestamp"] = timezone.now().isoformat()
        return Response(body, status=status_code)

    # ================================================================
    # SUCCESS RESPONSES
    # ================================================================

    @staticmethod
    def success(
        message: str = "OK", data: Any = None, status_code: int = status.HTTP_200_OK
    ) -> Response:
        return APIResponse._base_response(True, message, data=data, status_code=status_code)

    @staticmethod
    def created(message: str = "Created", data: Any = None) -> Response:
        return APIResponse.success(message, data, status.HTTP_201_CREATED)

    @staticmethod
    def updated(message: str = "Updated", data: Any = None) -> Response:
        return APIResponse.success(message, data)

    @staticmethod
    def deleted(message: str = "Deleted", data: Any = None) -> Response:
        """Deletions answer 200 with an envelope, optionally carrying data."""
        return APIResponse.success(message, data)

    @staticmethod
    def paginated(message: str, key: str, items: Any, pagination: Dict) -> Response:
        """
        Collection response.

        Args:
            message: Success message
            key: Name of the collection inside ``data``
            items: Serialized collection
            pagination: ``{page, limit, total, pages}`` block
        """
        return APIResponse.success(message, {key: items, "pagination": pagination})

    # ================================================================
    # ERROR RESPONSES
    # ================================================================

    @staticmethod
    def error(
        message: str = "Request failed",
        errors: Any = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> Response:
        return APIResponse._base_response(
            False, message, errors=errors, status_code=status_code
        )

    @staticmethod
    def validation_error(
        message: str = "Validation failed", field_errors: Optional[Dict] = None
    ) -> Response:
        """400 with per-field messages under ``errors.field_errors``."""
        errors = {"field_errors": field_errors} if field_errors else {}
        return APIResponse.error(message, errors, status.HTTP_400_BAD_REQUEST)

    @staticmethod
    def unauthorized(message: str = "Authentication required") -> Response:
        return APIResponse.error(message, status_code=status.HTTP_401_UNAUTHORIZED)

    @staticmethod
    def forbidden(message: str = "Access denied") -> Response:
        return APIResponse.error(message, status_code=status.HTTP_403_FORBIDDEN)

    @staticmethod
    def not_found(message: str = "Resource not found") -> Response:
        return APIResponse.error(message, status_code=status.HTTP_404_NOT_FOUND)

    @staticmethod
    def conflict(message: str = "Resource already exists") -> Response:
        return APIResponse.error(message, status_code=status.HTTP_409_CONFLICT)

    @staticmethod
    def server_error(message: str = "Internal server error") -> Response:
        return APIResponse.error(
            message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    # ================================================================
    # AUTHENTICATION
    # ================================================================

    @staticmethod
    def login_success(user_data: Dict, tokens: Dict, message: str) -> Response:
        return APIResponse.success(message, {"user": user_data, "tokens": tokens})

    @staticmethod
    def registration_success(user_data: Dict, tokens: Dict, message: str) -> Response:
        return APIResponse.created(message, {"user": user_data, "tokens": tokens})

    @staticmethod
    def logout_success(message: str) -> Response:
        return APIResponse.success(message)
