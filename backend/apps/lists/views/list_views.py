"""
Watchlist and movie list views.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from apps.movies.serializers import MovieListSerializer
from apps.movies.services import RecommendationService
from core.constants import Messages
from core.exceptions import (
    ConflictException,
    DatabaseException,
    PermissionException,
    ResourceException,
    ValidationException,
)
from core.responses import APIResponse

from ..serializers import (
    MovieListWriteSerializer,
    UserMovieListSerializer,
    WatchlistEntrySerializer,
)
from ..services import ListService

logger = logging.getLogger(__name__)

PAGE_PARAMETERS = [
    OpenApiParameter("page", OpenApiTypes.INT, description="Page number"),
    OpenApiParameter("limit", OpenApiTypes.INT, description="Items per page (max 100)"),
]


class ReadPublicWriteAuthenticatedMixin:
    """GET is public; every other method needs an authenticated user."""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]


# =============================================================================
# CUSTOM LISTS
# =============================================================================


class MovieListCollectionView(ReadPublicWriteAuthenticatedMixin, APIView):
    """
    GET  /api/lists/  public lists
    POST /api/lists/  create a list
    """

    list_service = ListService()

    @extend_schema(
        summary="Browse public lists",
        parameters=PAGE_PARAMETERS,
        responses={200: UserMovieListSerializer(many=True)},
        tags=["Lists"],
    )
    def get(self, request) -> Response:
        result = self.list_service.get_public_lists(
            page=request.query_params.get("page"),
            limit=request.query_params.get("limit"),
        )
        return APIResponse.paginated(
            message=Messages.SUCCESS,
            key="lists",
            items=UserMovieListSerializer(result["lists"], many=True).data,
            pagination=result["pagination"],
        )

    @extend_schema(
        summary="Create list",
        request=MovieListWriteSerializer,
        responses={201: UserMovieListSerializer, 400: {"description": "Invalid list"}},
        tags=["Lists"],
    )
    def post(self, request) -> Response:
        serializer = MovieListWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid list"), field_errors=serializer.errors
            )

        try:
            movie_list = self.list_service.create_list(
                request.user, **serializer.validated_data
            )
            return APIResponse.created(
                message=_("List created"),
                data={"list": UserMovieListSerializer(movie_list).data},
            )

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

        except DatabaseException as e:
            logger.error(f"List creation failed: {e}")
            return APIResponse.server_error(message=_("Failed to create list"))


class MovieListDetailView(ReadPublicWriteAuthenticatedMixin, APIView):
    """
    GET    /api/lists/<id>/
    PUT    /api/lists/<id>/
    DELETE /api/lists/<id>/
    """

    list_service = ListService()

    @extend_schema(
        summary="Get list",
        description="Public lists are visible to everyone; private lists only to their owner.",
        responses={200: UserMovieListSerializer, 404: {"description": "List not found"}},
        tags=["Lists"],
    )
    def get(self, request, list_id: int) -> Response:
        try:
            movie_list = self.list_service.get_list(list_id, request.user)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"list": UserMovieListSerializer(movie_list).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

    @extend_schema(
        summary="Update list",
        request=MovieListWriteSerializer,
        responses={
            200: UserMovieListSerializer,
            403: {"description": "Not the owner"},
            404: {"description": "List not found"},
        },
        tags=["Lists"],
    )
    def put(self, request, list_id: int) -> Response:
        serializer = MovieListWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid list"), field_errors=serializer.errors
            )

        try:
            movie_list = self.list_service.update_list(
                request.user, list_id, **serializer.validated_data
            )
            return APIResponse.updated(
                message=_("List updated"),
                data={"list": UserMovieListSerializer(movie_list).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))

        except ValidationException as e:
            return APIResponse.validation_error(
                message=str(e.detail), field_errors=e.field_errors
            )

    @extend_schema(
        summary="Delete list",
        responses={200: {"description": "List deleted"}},
        tags=["Lists"],
    )
    def delete(self, request, list_id: int) -> Response:
        try:
            self.list_service.delete_list(request.user, list_id)
            return APIResponse.deleted(message=_("List deleted"))

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except PermissionException as e:
            return APIResponse.forbidden(message=str(e.detail))


class UserListsView(APIView):
    """
    GET /api/lists/user/<user_id>/
    """

    permission_classes = [AllowAny]
    list_service = ListService()

    @extend_schema(
        summary="Lists of a user",
        description="Private lists are included only when you are the owner.",
        parameters=PAGE_PARAMETERS,
        responses={200: UserMovieListSerializer(many=True)},
        tags=["Lists"],
    )
    def get(self, request, user_id: int) -> Response:
        result = self.list_service.get_user_lists(
            user_id,
            viewer=request.user,
            page=request.query_params.get("page"),
            limit=request.query_params.get("limit"),
        )
        return APIResponse.paginated(
            message=Messages.SUCCESS,
            key="lists",
            items=UserMovieListSerializer(result["lists"], many=True).data,
            pagination=result["pagination"],
        )


class SimilarMoviesView(APIView):
    """
    GET /api/lists/similar/<movie_id>/
    """

    permission_classes = [AllowAny]
    recommendation_service = RecommendationService()

    @extend_schema(
        summary="Movies similar to a movie",
        parameters=[
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="Maximum results (default 10)"
            )
        ],
        responses={200: MovieListSerializer(many=True)},
        tags=["Lists"],
    )
    def get(self, request, movie_id: int) -> Response:
        try:
            limit = int(request.query_params.get("limit", 10))
        except ValueError:
            limit = 10

        try:
            movies = self.recommendation_service.get_similar_movies(movie_id, limit)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"movies": MovieListSerializer(movies, many=True).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ValidationException as e:
            return APIResponse.validation_error(message=str(e.detail))


# =============================================================================
# WATCHLIST
# =============================================================================


class MyWatchlistView(APIView):
    """
    GET /api/lists/watchlist/me/
    """

    permission_classes = [IsAuthenticated]
    list_service = ListService()

    @extend_schema(
        summary="My watchlist",
        parameters=PAGE_PARAMETERS,
        responses={200: WatchlistEntrySerializer(many=True)},
        tags=["Lists"],
    )
    def get(self, request) -> Response:
        try:
            result = self.list_service.get_watchlist(
                request.user.id,
                page=request.query_params.get("page"),
                limit=request.query_params.get("limit"),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="watchlist",
                items=WatchlistEntrySerializer(result["watchlist"], many=True).data,
                pagination=result["pagination"],
            )

        except DatabaseException as e:
            logger.error(f"Watchlist error for user {request.user.id}: {e}")
            return APIResponse.server_error(message=_("Failed to load watchlist"))


class WatchlistItemView(APIView):
    """
    POST   /api/lists/watchlist/<movie_id>/
    DELETE /api/lists/watchlist/<movie_id>/
    """

    permission_classes = [IsAuthenticated]
    list_service = ListService()

    @extend_schema(
        summary="Add to watchlist",
        request=None,
        responses={
            201: WatchlistEntrySerializer,
            404: {"description": "Movie not found"},
            409: {"description": "Already in watchlist"},
        },
        tags=["Lists"],
    )
    def post(self, request, movie_id: int) -> Response:
        try:
            entry = self.list_service.add_to_watchlist(request.user, movie_id)
            return APIResponse.created(
                message=_("Movie added to watchlist"),
                data={"entry": WatchlistEntrySerializer(entry).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

        except ConflictException as e:
            return APIResponse.conflict(message=str(e.detail))

    @extend_schema(
        summary="Remove from watchlist",
        responses={200: {"description": "Removed"}, 404: {"description": "Not in watchlist"}},
        tags=["Lists"],
    )
    def delete(self, request, movie_id: int) -> Response:
        try:
            self.list_service.remove_from_watchlist(request.user, movie_id)
            return APIResponse.deleted(message=_("Movie removed from watchlist"))

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))
