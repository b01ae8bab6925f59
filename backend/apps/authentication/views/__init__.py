"""
Authentication app views.
"""

from .admin_views import (
    AdminDashboardStatsView,
    AdminUserDetailView,
    AdminUserListView,
    AdminUserRoleView,
    AdminUserStatusView,
)
from .auth_views import (
    UserLoginView,
    UserLogoutView,
    UserProfileView,
    UserRegistrationView,
)

__all__ = [
    # Auth
    "UserRegistrationView",
    "UserLoginView",
    "UserLogoutView",
    "UserProfileView",
    # Admin
    "AdminUserListView",
    "AdminUserDetailView",
    "AdminUserRoleView",
    "AdminUserStatusView",
    "AdminDashboardStatsView",
]
