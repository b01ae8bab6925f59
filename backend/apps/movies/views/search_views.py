"""
Search views: text search, filters, autocomplete and people lookups.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.constants import Messages, SortOption
from core.exceptions import DatabaseException, ValidationException
from core.responses import APIResponse

from ..serializers import MovieListSerializer
from ..services import MovieSearchCriteria, SearchService

logger = logging.getLogger(__name__)

FILTER_PARAMETERS = [
    OpenApiParameter("genres", OpenApiTypes.STR, description="Genre IDs, comma separated"),
    OpenApiParameter("actors", OpenApiTypes.STR, description="Actor IDs, comma separated"),
    OpenApiParameter(
        "directors", OpenApiTypes.STR, description="Director IDs, comma separated"
    ),
    OpenApiParameter("year_from", OpenApiTypes.INT),
    OpenApiParameter("year_to", OpenApiTypes.INT),
    OpenApiParameter("rating_from", OpenApiTypes.NUMBER),
    OpenApiParameter("rating_to", OpenApiTypes.NUMBER),
    OpenApiParameter("country", OpenApiTypes.STR),
    OpenApiParameter("language", OpenApiTypes.STR),
    OpenApiParameter("sort", OpenApiTypes.STR, enum=SortOption.values),
    OpenApiParameter("page", OpenApiTypes.INT),
    OpenApiParameter("limit", OpenApiTypes.INT, description="Items per page (max 100)"),
]


class BaseSearchView(APIView):
    permission_classes = [AllowAny]
    search_service = SearchService()

    def run_search(self, criteria: MovieSearchCriteria) -> Response:
        result = self.search_service.advanced_search(criteria)
        return APIResponse.paginated(
            message=Messages.SUCCESS,
            key="movies",
            items=MovieListSerializer(result["movies"], many=True).data,
            pagination=result["pagination"],
        )

    def require_query(self, request, name="q", min_length=1) -> str:
        query = (request.query_params.get(name) or "").strip()
        if len(query) < min_length:
            raise ValidationException(
                "Search query is required",
                field_errors={name: [f"Minimum {min_length} characters required"]},
            )
        return query


class MovieSearchView(BaseSearchView):
    """
    GET /api/movies/search/?q=...
    """

    @extend_schema(
        summary="Search movies",
        description="Match title or description, combined with any filters.",
        parameters=[
            OpenApiParameter(
                "q", OpenApiTypes.STR, required=True, description="Search query"
            ),
            *FILTER_PARAMETERS,
        ],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            self.require_query(request)
            return self.run_search(MovieSearchCriteria.from_query_params(request.query_params))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

        except DatabaseException as e:
            logger.error(f"Search failed: {e}")
            return APIResponse.server_error(message=_("Search failed"))


class MovieFilterView(BaseSearchView):
    """
    GET /api/movies/filter/
    """

    @extend_schema(
        summary="Filter movies",
        description="Every filter is optional; without filters all active movies match.",
        parameters=FILTER_PARAMETERS,
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            return self.run_search(MovieSearchCriteria.from_query_params(request.query_params))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

        except DatabaseException as e:
            logger.error(f"Filter failed: {e}")
            return APIResponse.server_error(message=_("Filter failed"))


class AutocompleteView(BaseSearchView):
    """
    GET /api/movies/autocomplete/?q=...
    """

    @extend_schema(
        summary="Autocomplete",
        description=(
            "Up to five suggestions each for movies, actors, directors and genres."
        ),
        parameters=[
            OpenApiParameter(
                "q", OpenApiTypes.STR, required=True, description="At least 2 characters"
            )
        ],
        responses={200: {"description": "Suggestions grouped by kind"}},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            query = self.require_query(request, min_length=2)
            suggestions = self.search_service.get_autocomplete_suggestions(query)
            return APIResponse.success(message=Messages.SUCCESS, data=suggestions)

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

        except DatabaseException as e:
            logger.error(f"Autocomplete failed: {e}")
            return APIResponse.server_error(message=_("Autocomplete failed"))


class FilterOptionsView(BaseSearchView):
    """
    GET /api/movies/filter-options/
    """

    @extend_schema(
        summary="Filter options",
        description="Genres, release year range, countries and languages.",
        responses={200: {"description": "Available filter values"}},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            return APIResponse.success(
                message=Messages.SUCCESS, data=self.search_service.get_filter_options()
            )

        except DatabaseException as e:
            logger.error(f"Filter options failed: {e}")
            return APIResponse.server_error(message=_("Failed to load filter options"))


class MoviesByActorView(BaseSearchView):
    """
    GET /api/movies/by-actor/?name=...
    """

    @extend_schema(
        summary="Movies by actor",
        parameters=[OpenApiParameter("name", OpenApiTypes.STR, required=True)],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            name = self.require_query(request, name="name")
            movies = self.search_service.search_by_actor(name)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"movies": MovieListSerializer(movies, many=True).data},
            )

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )


class MoviesByDirectorView(BaseSearchView):
    """
    GET /api/movies/by-director/?name=...
    """

    @extend_schema(
        summary="Movies by director",
        parameters=[OpenApiParameter("name", OpenApiTypes.STR, required=True)],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Search"],
    )
    def get(self, request) -> Response:
        try:
            name = self.require_query(request, name="name")
            movies = self.search_service.search_by_director(name)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"movies": MovieListSerializer(movies, many=True).data},
            )

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )
