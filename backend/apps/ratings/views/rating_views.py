"""
Rating views: rate a movie, list my ratings, movie rating statistics.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.constants import Messages, RatingSortOption
from core.exceptions import (
    ConflictException,
    DatabaseException,
    ResourceException,
    ValidationException,
)
from core.responses import APIResponse

from ..serializers import (
    RatingInputSerializer,
    RatingSerializer,
    RatingStatsSerializer,
    UserRatingSerializer,
)
from ..services import RatingService

logger = logging.getLogger(__name__)


class MovieRatingView(APIView):
    """
    The authenticated user's rating for one movie.

    GET    /api/movies/<id>/rating/
    POST   /api/movies/<id>/rating/
    PUT    /api/movies/<id>/rating/
    DELETE /api/movies/<id>/rating/
    """

    permission_classes = [IsAuthenticated]
    rating_service = RatingService()

    @extend_schema(
        summary="Get my rating",
        description="Return the current user's rating for the movie, or null.",
        responses={200: RatingSerializer},
        tags=["Ratings"],
    )
    def get(self, request, movie_id: int) -> Response:
        rating = self.rating_service.get_user_rating(request.user.id, movie_id)
        return APIResponse.success(
            message=Messages.SUCCESS,
            data={"rating": RatingSerializer(rating).data if rating else None},
        )

    @extend_schema(
        summary="Rate a movie",
        description=(
            "Create the current user's 1-10 rating for the movie. "
            "A user can rate a movie only once; use PUT to change the score."
        ),
        request=RatingInputSerializer,
        responses={
            201: RatingSerializer,
            400: {"description": "Score outside 1-10"},
            404: {"description": "Movie not found"},
            409: {"description": "Movie already rated"},
        },
        examples=[
            OpenApiExample("Rate 8", value={"score": 8}, request_only=True),
        ],
        tags=["Ratings"],
    )
    def post(self, request, movie_id: int) -> Response:
        serializer = RatingInputSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid rating"), field_errors=serializer.errors
            )

        try:
            rating = self.rating_service.create_rating(
                request.user, movie_id, serializer.validated_data["score"]
            )
            return APIResponse.created(
                message=_("Rating created"),
                data={"rating": RatingSerializer(rating).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ConflictException as e:
            return APIResponse.conflict(message=str(e.detail))

    @extend_schema(
        summary="Update my rating",
        request=RatingInputSerializer,
        responses={200: RatingSerializer, 404: {"description": "Rating not found"}},
        tags=["Ratings"],
    )
    def put(self, request, movie_id: int) -> Response:
        serializer = RatingInputSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid rating"), field_errors=serializer.errors
            )

        try:
            rating = self.rating_service.update_rating(
                request.user, movie_id, serializer.validated_data["score"]
            )
            return APIResponse.updated(
                message=_("Rating updated"),
                data={"rating": RatingSerializer(rating).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

    @extend_schema(
        summary="Delete my rating",
        responses={
            200: {"description": "Rating deleted"},
            409: {"description": "Rating belongs to a review"},
        },
        tags=["Ratings"],
    )
    def delete(self, request, movie_id: int) -> Response:
        try:
            aggregate = self.rating_service.delete_rating(request.user, movie_id)
            return APIResponse.deleted(message=_("Rating deleted"), data=aggregate)

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ConflictException as e:
            return APIResponse.conflict(message=str(e.detail))


class MovieRatingStatsView(APIView):
    """
    Average, count and score distribution for a movie.

    GET /api/movies/<id>/ratings/stats/
    """

    permission_classes = [AllowAny]
    rating_service = RatingService()

    @extend_schema(
        summary="Movie rating statistics",
        responses={200: RatingStatsSerializer, 404: {"description": "Movie not found"}},
        tags=["Ratings"],
    )
    def get(self, request, movie_id: int) -> Response:
        try:
            stats = self.rating_service.get_rating_stats(movie_id)
            return APIResponse.success(
                message=Messages.SUCCESS, data=RatingStatsSerializer(stats).data
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except DatabaseException as e:
            logger.error(f"Rating stats error for movie {movie_id}: {e}")
            return APIResponse.server_error(message=_("Failed to load rating stats"))


class MyRatingsView(APIView):
    """
    The authenticated user's ratings.

    GET /api/movies/ratings/me/
    """

    permission_classes = [IsAuthenticated]
    rating_service = RatingService()

    @extend_schema(
        summary="List my ratings",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="Page number"),
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="Items per page (max 100)"
            ),
            OpenApiParameter(
                "sort",
                OpenApiTypes.STR,
                enum=RatingSortOption.values,
                description="Sort order",
            ),
        ],
        responses={200: UserRatingSerializer(many=True)},
        tags=["Ratings"],
    )
    def get(self, request) -> Response:
        try:
            result = self.rating_service.get_user_ratings(
                request.user.id,
                page=request.query_params.get("page"),
                limit=request.query_params.get("limit"),
                sort=request.query_params.get("sort", RatingSortOption.NEWEST),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="ratings",
                items=UserRatingSerializer(result["ratings"], many=True).data,
                pagination=result["pagination"],
            )

        except DatabaseException as e:
            logger.error(f"My ratings error for user {request.user.id}: {e}")
            return APIResponse.server_error(message=_("Failed to load ratings"))
