from .admin import (
    AdminRoleSerializer,
    AdminStatusSerializer,
    AdminUserDetailSerializer,
    AdminUserListSerializer,
)
from .user import (
    LogoutSerializer,
    UserLoginSerializer,
    UserProfileUpdateSerializer,
    UserRegistrationSerializer,
    UserSerializer,
    UserSummarySerializer,
)

__all__ = [
    # User Serializers
    "UserSerializer",
    "UserSummarySerializer",
    "UserRegistrationSerializer",
    "UserLoginSerializer",
    "LogoutSerializer",
    "UserProfileUpdateSerializer",
    # Admin Serializers
    "AdminUserListSerializer",
    "AdminUserDetailSerializer",
    "AdminRoleSerializer",
    "AdminStatusSerializer",
]
