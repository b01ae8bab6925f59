"""
Review moderation views for admins.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.constants import Messages
from core.exceptions import DatabaseException, ResourceException
from core.permissions import IsAdminUser
from core.responses import APIResponse

from ..serializers import AdminReviewSerializer, ReviewVisibilitySerializer
from .review_views import review_service

logger = logging.getLogger(__name__)


def _parse_int(value):
    return int(value) if value not in (None, "") and str(value).isdigit() else None


class AdminReviewListView(APIView):
    """
    GET /api/admin/reviews/
    """

    permission_classes = [IsAdminUser]
    review_service = review_service

    @extend_schema(
        summary="List reviews for moderation",
        parameters=[
            OpenApiParameter(
                "is_hidden", OpenApiTypes.BOOL, description="Filter by visibility"
            ),
            OpenApiParameter("movie_id", OpenApiTypes.INT),
            OpenApiParameter("user_id", OpenApiTypes.INT),
            OpenApiParameter("page", OpenApiTypes.INT),
            OpenApiParameter("limit", OpenApiTypes.INT),
        ],
        responses={200: AdminReviewSerializer(many=True)},
        tags=["Admin"],
    )
    def get(self, request) -> Response:
        params = request.query_params
        is_hidden = params.get("is_hidden")
        if is_hidden is not None:
            is_hidden = is_hidden.lower() in ("true", "1")

        try:
            result = self.review_service.list_reviews(
                is_hidden=is_hidden,
                movie_id=_parse_int(params.get("movie_id")),
                user_id=_parse_int(params.get("user_id")),
                page=params.get("page"),
                limit=params.get("limit"),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="reviews",
                items=AdminReviewSerializer(result["reviews"], many=True).data,
                pagination=result["pagination"],
            )

        except DatabaseException as e:
            logger.error(f"Admin review listing failed: {e}")
            return APIResponse.server_error(message=_("Failed to load reviews"))


class AdminReviewVisibilityView(APIView):
    """
    PUT /api/admin/reviews/<id>/visibility/
    """

    permission_classes = [IsAdminUser]
    review_service = review_service

    @extend_schema(
        summary="Hide or show a review",
        request=ReviewVisibilitySerializer,
        responses={200: AdminReviewSerializer},
        tags=["Admin"],
    )
    def put(self, request, review_id: int) -> Response:
        serializer = ReviewVisibilitySerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(field_errors=serializer.errors)

        try:
            review = self.review_service.set_visibility(
                review_id, serializer.validated_data["is_hidden"]
            )
            return APIResponse.updated(
                message=_("Review visibility updated"),
                data={"review": AdminReviewSerializer(review).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))


class AdminReviewDeleteView(APIView):
    """
    DELETE /api/admin/reviews/<id>/
    """

    permission_classes = [IsAdminUser]
    review_service = review_service

    @extend_schema(
        summary="Delete any review",
        responses={200: {"description": "Review deleted"}},
        tags=["Admin"],
    )
    def delete(self, request, review_id: int) -> Response:
        try:
            aggregate = self.review_service.delete_review(review_id, request.user)
            return APIResponse.deleted(message=_("Review deleted"), data=aggregate)

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))
