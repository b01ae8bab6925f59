"""
Authentication Services Base Module
"""

from .admin_service import AdminService
from .auth_service import AuthenticationService

__all__ = [
    "AuthenticationService",
    "AdminService",
]
