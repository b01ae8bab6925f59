"""
Admin management views for FilmRate.
Handles user listing, role and status changes, deletion and site statistics.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.decorators import method_decorator
from django.utils.translation import gettext_lazy as _
from django.views.decorators.cache import never_cache

from apps.movies.serializers import MovieSummarySerializer
from apps.reviews.serializers import AdminReviewSerializer
from core.constants import Messages, UserRole
from core.exceptions import (
    PermissionException,
    UserNotFoundException,
    ValidationException,
)
from core.permissions import IsAdminUser
from core.responses import APIResponse

from ..serializers import (
    AdminRoleSerializer,
    AdminStatusSerializer,
    AdminUserDetailSerializer,
    AdminUserListSerializer,
)
from ..services import AdminService

logger = logging.getLogger(__name__)


@method_decorator(never_cache, name="dispatch")
class AdminUserListView(APIView):
    """
    List users.

    **Permissions:** Admin only
    **HTTP Methods:** GET
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="admin_users_list",
        summary="List Users",
        tags=["Admin"],
        parameters=[
            OpenApiParameter(
                "search", OpenApiTypes.STR, description="Match username or email"
            ),
            OpenApiParameter("role", OpenApiTypes.STR, enum=UserRole.values),
            OpenApiParameter("is_active", OpenApiTypes.BOOL),
            OpenApiParameter("page", OpenApiTypes.INT),
            OpenApiParameter("limit", OpenApiTypes.INT),
        ],
        responses={200: AdminUserListSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        params = request.query_params
        is_active = params.get("is_active")
        if is_active is not None:
            is_active = is_active.lower() in ("true", "1")

        try:
            result = AdminService.list_users(
                search=params.get("search"),
                role=params.get("role"),
                is_active=is_active,
                page=params.get("page"),
                limit=params.get("limit"),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="users",
                items=AdminUserListSerializer(result["users"], many=True).data,
                pagination=result["pagination"],
            )

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )


@method_decorator(never_cache, name="dispatch")
class AdminUserDetailView(APIView):
    """
    Inspect or delete a user.

    **Permissions:** Admin only
    **HTTP Methods:** GET, DELETE
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="admin_users_detail",
        summary="User Detail",
        tags=["Admin"],
        responses={200: AdminUserDetailSerializer, 404: {"description": "Not found"}},
    )
    def get(self, request: Request, user_id: int) -> Response:
        try:
            user = AdminService.get_user_detail(user_id)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"user": AdminUserDetailSerializer(user).data},
            )

        except UserNotFoundException as e:
            return APIResponse.not_found(message=str(e.detail))

    @extend_schema(
        operation_id="admin_users_delete",
        summary="Delete User",
        description="Delete a user with their ratings, reviews and lists.",
        tags=["Admin"],
        responses={
            200: {"description": "User deleted"},
            403: {"description": "Cannot delete yourself"},
            404: {"description": "Not found"},
        },
    )
    def delete(self, request: Request, user_id: int) -> Response:
        try:
            AdminService.delete_user(request.user, user_id)
            return APIResponse.deleted(message=_("User deleted"))

        except UserNotFoundException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))


@method_decorator(never_cache, name="dispatch")
class AdminUserRoleView(APIView):
    """
    PUT /api/admin/users/<id>/role/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="admin_users_role",
        summary="Change User Role",
        tags=["Admin"],
        request=AdminRoleSerializer,
        responses={200: AdminUserListSerializer},
    )
    def put(self, request: Request, user_id: int) -> Response:
        serializer = AdminRoleSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(field_errors=serializer.errors)

        try:
            user = AdminService.change_role(
                request.user, user_id, serializer.validated_data["role"]
            )
            return APIResponse.updated(
                message=_("User role updated"),
                data={"user": AdminUserListSerializer(user).data},
            )

        except UserNotFoundException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))


@method_decorator(never_cache, name="dispatch")
class AdminUserStatusView(APIView):
    """
    PUT /api/admin/users/<id>/status/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="admin_users_status",
        summary="Activate or Deactivate User",
        tags=["Admin"],
        request=AdminStatusSerializer,
        responses={200: AdminUserListSerializer},
    )
    def put(self, request: Request, user_id: int) -> Response:
        serializer = AdminStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(field_errors=serializer.errors)

        try:
            user = AdminService.change_status(
                request.user, user_id, serializer.validated_data["is_active"]
            )
            return APIResponse.updated(
                message=_("User status updated"),
                data={"user": AdminUserListSerializer(user).data},
            )

        except UserNotFoundException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))


@method_decorator(never_cache, name="dispatch")
class AdminDashboardStatsView(APIView):
    """
    GET /api/admin/stats/
    """

    permission_classes = [IsAdminUser]

    @extend_schema(
        operation_id="admin_stats",
        summary="Dashboard Statistics",
        description=(
            "Site totals, the five newest users and reviews, and the ten best "
            "rated movies with at least five ratings."
        ),
        tags=["Admin"],
        responses={200: {"description": "Dashboard statistics"}},
    )
    def get(self, request: Request) -> Response:
        stats = AdminService.get_dashboard_stats()
        return APIResponse.success(
            message=Messages.SUCCESS,
            data={
                "totals": stats["totals"],
                "recent_users": AdminUserListSerializer(
                    stats["recent_users"], many=True
                ).data,
                "recent_reviews": AdminReviewSerializer(
                    stats["recent_reviews"], many=True
                ).data,
                "top_movies": MovieSummarySerializer(
                    stats["top_movies"], many=True
                ).data,
            },
        )
