"""
Recommendation views: personalized picks and movie similarity.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers import MovieListSerializer
from .base_discovery import BaseDiscoveryView

logger = logging.getLogger(__name__)

LIMIT_PARAMETER = OpenApiParameter(
    "limit", OpenApiTypes.INT, description="Maximum results (max 50)"
)


class PersonalizedRecommendationsView(BaseDiscoveryView):
    """
    Movies in the genres of the user's highly rated movies.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Personalized recommendations",
        description=(
            "Well rated movies in the genres you rated 7 or higher, excluding "
            "movies you rated or saved. Falls back to trending."
        ),
        parameters=[LIMIT_PARAMETER],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request) -> Response:
        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_personalized_recommendations(
                request.user.id, self.parse_limit(request)
            )
        )


class SimilarMoviesView(BaseDiscoveryView):
    @extend_schema(
        summary="Similar movies",
        description="Active movies sharing at least one genre, best rated first.",
        parameters=[LIMIT_PARAMETER],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request, movie_id: int) -> Response:
        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_similar_movies(
                movie_id, self.parse_limit(request)
            )
        )


class BecauseYouWatchedView(BaseDiscoveryView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Because you watched",
        description=(
            "Movies sharing a genre or director with this movie, excluding "
            "movies you already rated."
        ),
        parameters=[LIMIT_PARAMETER],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request, movie_id: int) -> Response:
        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_because_you_watched_recommendations(
                request.user.id, movie_id, self.parse_limit(request)
            )
        )
