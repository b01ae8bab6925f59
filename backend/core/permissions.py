"""
Custom permission classes for FilmRate API.
"""

import logging

from rest_framework import permissions
from rest_framework.request import Request
from rest_framework.views import View

from .constants import UserRole

logger = logging.getLogger(__name__)


# =========================================================================
# BASE PERMISSION CLASSES
# =========================================================================


class BasePermission(permissions.BasePermission):
    """
    Base permission class with denial logging.
    """

    def log_permission_denied(self, request: Request, reason: str):
        """Log permission denial for security monitoring."""
        user_info = (
            f"User: {request.user.id if request.user.is_authenticated else 'Anonymous'}"
        )
        logger.warning(
            f"Permission denied - {reason} | {user_info} | Path: {request.path}"
        )


# =========================================================================
# ADMIN PERMISSION CLASSES
# =========================================================================


class IsAdminUser(BasePermission):
    """
    Allows access only to admin users.

    A user is an admin when their role is ``admin`` or when the Django
    staff/superuser flags are set.

    Usage:
        permission_classes = [IsAuthenticated, IsAdminUser]
    """

    message = "Admin access required. Only administrators can perform this action."

    def has_permission(self, request: Request, view: View) -> bool:
        """Check if user is authenticated admin."""
        if not request.user or not request.user.is_authenticated:
            self.log_permission_denied(
                request, "User not authenticated for admin action"
            )
            return False

        if not is_admin_user(request.user):
            self.log_permission_denied(request, "Non-admin user attempted admin action")
            return False

        logger.info(f"Admin access granted to user {request.user.id}")
        return True


# =========================================================================
# UTILITY PERMISSION FUNCTIONS
# =========================================================================


def is_admin_user(user) -> bool:
    """
    Check if user is an admin.

    Args:
        user: User instance

    Returns:
        bool: True if user is admin
    """
    if not user or not user.is_authenticated:
        return False

    return (
        getattr(user, "role", None) == UserRole.ADMIN
        or user.is_staff
        or user.is_superuser
    )


def is_owner_or_admin(user, obj) -> bool:
    """
    Check if user owns object or is admin.

    Args:
        user: User instance
        obj: Object to check ownership

    Returns:
        bool: True if user owns object or is admin
    """
    if not user or not user.is_authenticated:
        return False

    if is_admin_user(user):
        return True

    owner_id = getattr(obj, "user_id", None) or getattr(obj, "created_by_id", None)
    return owner_id is not None and owner_id == user.pk
