"""
Review views: write, edit, delete and vote on reviews; list a movie's reviews.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from apps.ratings.services import RatingService
from core.constants import Messages, ReviewSortOption
from core.exceptions import (
    ConflictException,
    DatabaseException,
    PermissionException,
    ResourceException,
    ValidationException,
)
from core.responses import APIResponse

from ..serializers import (
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
    ReviewVoteSerializer,
)
from ..services import ReviewService

logger = logging.getLogger(__name__)

review_service = ReviewService(rating_service=RatingService())


class ReviewCreateView(APIView):
    """
    Write a review.

    POST /api/reviews/
    """

    permission_classes = [IsAuthenticated]
    review_service = review_service

    @extend_schema(
        summary="Create review",
        description=(
            "Review a movie with a 1-10 rating and at least 10 characters of "
            "text. The rating also becomes the user's rating for the movie."
        ),
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: {"description": "Validation error"},
            404: {"description": "Movie not found"},
            409: {"description": "Movie already reviewed"},
        },
        examples=[
            OpenApiExample(
                "Review",
                value={
                    "movie_id": 1,
                    "rating": 9,
                    "content": "A tense, beautifully shot thriller.",
                },
                request_only=True,
            ),
        ],
        tags=["Reviews"],
    )
    def post(self, request) -> Response:
        serializer = ReviewCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid review"), field_errors=serializer.errors
            )

        try:
            review = self.review_service.create_review(
                request.user,
                serializer.validated_data["movie_id"],
                serializer.validated_data["rating"],
                serializer.validated_data["content"],
            )
            return APIResponse.created(
                message=_("Review created"),
                data={"review": ReviewSerializer(review).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ConflictException as e:
            return APIResponse.conflict(message=str(e.detail))


class ReviewDetailView(APIView):
    """
    Edit or delete a review.

    PUT    /api/reviews/<id>/
    DELETE /api/reviews/<id>/
    """

    permission_classes = [IsAuthenticated]
    review_service = review_service

    @extend_schema(
        summary="Update review",
        description="Edit your own review. Marks the review as edited.",
        request=ReviewUpdateSerializer,
        responses={
            200: ReviewSerializer,
            403: {"description": "Not the author"},
            404: {"description": "Review not found"},
        },
        tags=["Reviews"],
    )
    def put(self, request, review_id: int) -> Response:
        serializer = ReviewUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid review"), field_errors=serializer.errors
            )

        try:
            review = self.review_service.update_review(
                request.user, review_id, **serializer.validated_data
            )
            return APIResponse.updated(
                message=_("Review updated"),
                data={"review": ReviewSerializer(review).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))

        except DatabaseException as e:
            logger.error(f"Review update failed: {e}")
            return APIResponse.server_error(message=_("Failed to update review"))

    @extend_schema(
        summary="Delete review",
        description=(
            "Delete your own review. The rating it carried is removed and the "
            "movie's average is recomputed."
        ),
        responses={
            200: {"description": "Review deleted"},
            403: {"description": "Not the author"},
            404: {"description": "Review not found"},
        },
        tags=["Reviews"],
    )
    def delete(self, request, review_id: int) -> Response:
        try:
            aggregate = self.review_service.delete_review(review_id, request.user)
            return APIResponse.deleted(message=_("Review deleted"), data=aggregate)

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))

        except DatabaseException as e:
            logger.error(f"Review delete failed: {e}")
            return APIResponse.server_error(message=_("Failed to delete review"))


class ReviewVoteView(APIView):
    """
    Vote a review helpful or unhelpful.

    POST /api/reviews/<id>/vote/
    """

    permission_classes = [IsAuthenticated]
    review_service = review_service

    @extend_schema(
        summary="Vote on review",
        request=ReviewVoteSerializer,
        responses={
            200: ReviewSerializer,
            403: {"description": "Own review"},
            404: {"description": "Review not found"},
            409: {"description": "Already voted"},
        },
        examples=[
            OpenApiExample(
                "Helpful", value={"vote_type": "helpful"}, request_only=True
            ),
        ],
        tags=["Reviews"],
    )
    def post(self, request, review_id: int) -> Response:
        serializer = ReviewVoteSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid vote"), field_errors=serializer.errors
            )

        try:
            review = self.review_service.vote_review(
                request.user, review_id, serializer.validated_data["vote_type"]
            )
            return APIResponse.success(
                message=_("Vote recorded"),
                data={"review": ReviewSerializer(review).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))

        except ConflictException as e:
            return APIResponse.conflict(message=str(e.detail))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )


class MovieReviewsView(APIView):
    """
    Visible reviews of a movie.

    GET /api/movies/<id>/reviews/
    """

    permission_classes = [AllowAny]
    review_service = review_service

    @extend_schema(
        summary="List movie reviews",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="Page number"),
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="Items per page (max 100)"
            ),
            OpenApiParameter(
                "sort",
                OpenApiTypes.STR,
                enum=ReviewSortOption.values,
                description="Sort order",
            ),
        ],
        responses={200: ReviewSerializer(many=True)},
        tags=["Reviews"],
    )
    def get(self, request, movie_id: int) -> Response:
        try:
            result = self.review_service.get_movie_reviews(
                movie_id,
                page=request.query_params.get("page"),
                limit=request.query_params.get("limit"),
                sort=request.query_params.get("sort", ReviewSortOption.NEWEST),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="reviews",
                items=ReviewSerializer(result["reviews"], many=True).data,
                pagination=result["pagination"],
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except DatabaseException as e:
            logger.error(f"Movie reviews error for movie {movie_id}: {e}")
            return APIResponse.server_error(message=_("Failed to load reviews"))
