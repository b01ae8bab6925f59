"""
Discovery views: trending, top rated, genre listings and the homepage.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.response import Response

from django.utils.translation import gettext_lazy as _

from core.constants import DEFAULT_MOVIE_SORT, Messages, SortOption
from core.exceptions import DatabaseException
from core.responses import APIResponse

from ..serializers import MovieListSerializer
from .base_discovery import BaseDiscoveryView

logger = logging.getLogger(__name__)

LIMIT_PARAMETER = OpenApiParameter(
    "limit", OpenApiTypes.INT, description="Maximum results (max 50)"
)


class TrendingMoviesView(BaseDiscoveryView):
    @extend_schema(
        summary="Get trending movies",
        description="Most viewed active movies, ties broken by average rating.",
        parameters=[LIMIT_PARAMETER],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request) -> Response:
        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_trending_movies(
                self.parse_limit(request)
            )
        )


class TopRatedMoviesView(BaseDiscoveryView):
    @extend_schema(
        summary="Get top rated movies",
        parameters=[
            LIMIT_PARAMETER,
            OpenApiParameter(
                "min_ratings",
                OpenApiTypes.INT,
                description="Minimum number of ratings (default 10)",
            ),
        ],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request) -> Response:
        try:
            min_ratings = max(int(request.query_params.get("min_ratings", 10)), 0)
        except ValueError:
            return APIResponse.validation_error(
                "Invalid min_ratings", {"min_ratings": ["Must be an integer"]}
            )

        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_top_rated_movies(
                self.parse_limit(request), min_ratings=min_ratings
            )
        )


class GenreMoviesView(BaseDiscoveryView):
    @extend_schema(
        summary="Movies by genre",
        parameters=[
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="Maximum results (default 20)"
            ),
            OpenApiParameter(
                "sort", OpenApiTypes.STR, enum=SortOption.values, description="Sort order"
            ),
        ],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Discovery"],
    )
    def get(self, request, genre_id: int) -> Response:
        sort = request.query_params.get("sort", DEFAULT_MOVIE_SORT)
        return self.handle_discovery_request(
            lambda: self.recommendation_service.get_movies_by_genre(
                genre_id, self.parse_limit(request, default=20), sort=sort
            )
        )


class HomepageView(BaseDiscoveryView):
    """
    Homepage sections. Authenticated users also get a ``for_you`` section.
    """

    @extend_schema(
        summary="Homepage recommendations",
        description=(
            "Trending, top rated and recently added movies; personalized picks "
            "when authenticated."
        ),
        responses={200: {"description": "Homepage sections"}},
        tags=["Movies - Discovery"],
    )
    def get(self, request) -> Response:
        user_id = request.user.id if request.user.is_authenticated else None

        try:
            sections = self.recommendation_service.get_homepage_recommendations(user_id)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={
                    name: MovieListSerializer(movies, many=True).data
                    for name, movies in sections.items()
                },
            )

        except DatabaseException as e:
            logger.error(f"Homepage error: {e}")
            return APIResponse.server_error(message=_("Failed to load homepage"))
