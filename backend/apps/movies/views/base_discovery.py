"""
Base Discovery View
"""

import logging

from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from core.exceptions import DatabaseException, ResourceException, ValidationException
from core.responses import APIResponse

from ..serializers import MovieListSerializer
from ..services import RecommendationService

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 50


class BaseDiscoveryView(APIView):
    """Base class for discovery views returning a plain list of movies."""

    permission_classes = [AllowAny]
    recommendation_service = RecommendationService()

    def parse_limit(self, request, default=DEFAULT_LIMIT) -> int:
        """
        Read ``limit`` from the query string, capped at 50.

        Raises:
            ValidationException: Not a positive integer
        """
        raw = request.query_params.get("limit")
        if raw in (None, ""):
            return default

        try:
            limit = int(raw)
        except ValueError:
            limit = 0

        if limit < 1:
            raise ValidationException(
                "Invalid limit", field_errors={"limit": ["Must be a positive integer"]}
            )
        return min(limit, MAX_LIMIT)

    def handle_discovery_request(self, get_movies_func):
        """
        Run a movie-list query and wrap the result in the envelope.

        Args:
            get_movies_func: Callable returning a list of movies
        """
        view_name = self.__class__.__name__.replace("View", "")

        try:
            movies = get_movies_func()
            logger.info(f"{view_name}: {len(movies)} results")

            return APIResponse.success(
                f"Retrieved {len(movies)} movies",
                {"movies": MovieListSerializer(movies, many=True).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

        except DatabaseException as e:
            logger.error(f"{view_name} error: {e}")
            return APIResponse.server_error(f"Failed to get {view_name.lower()}")
