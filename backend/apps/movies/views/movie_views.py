"""
Core Movie CRUD Operations.
"""

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.constants import Messages, SortOption
from core.exceptions import DatabaseException, ResourceException
from core.permissions import IsAdminUser
from core.responses import APIResponse

from ..serializers import (
    MovieDetailSerializer,
    MovieListSerializer,
    MovieWriteSerializer,
)
from ..services import MovieService

logger = logging.getLogger(__name__)


class MovieListView(APIView):
    """
    Movie listing.
    """

    permission_classes = [AllowAny]
    movie_service = MovieService()

    @extend_schema(
        summary="List movies",
        description="Paginated catalog of active movies.",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="Page number"),
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="Items per page (max 100)"
            ),
            OpenApiParameter(
                "sort", OpenApiTypes.STR, enum=SortOption.values, description="Sort order"
            ),
        ],
        responses={200: MovieListSerializer(many=True)},
        tags=["Movies - Public"],
    )
    def get(self, request) -> Response:
        try:
            result = self.movie_service.list_movies(
                page=request.query_params.get("page"),
                limit=request.query_params.get("limit"),
                sort=request.query_params.get("sort", SortOption.NEWEST),
            )
            return APIResponse.paginated(
                message=Messages.SUCCESS,
                key="movies",
                items=MovieListSerializer(result["movies"], many=True).data,
                pagination=result["pagination"],
            )

        except DatabaseException as e:
            logger.error(f"Movie listing failed: {e}")
            return APIResponse.server_error(message=_("Failed to load movies"))


class MovieDetailView(APIView):
    """
    Movie detail. Every successful lookup counts one view.
    """

    permission_classes = [AllowAny]
    movie_service = MovieService()

    @extend_schema(
        summary="Get movie details",
        responses={200: MovieDetailSerializer, 404: {"description": "Movie not found"}},
        tags=["Movies - Public"],
    )
    def get(self, request, movie_id: int) -> Response:
        try:
            movie = self.movie_service.get_movie_detail(movie_id)
            return APIResponse.success(
                message=Messages.SUCCESS,
                data={"movie": MovieDetailSerializer(movie).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))


# =============================================================================
# ADMIN
# =============================================================================


class AdminMovieCreateView(APIView):
    """
    POST /api/admin/movies/
    """

    permission_classes = [IsAdminUser]
    movie_service = MovieService()

    @extend_schema(
        summary="Create movie",
        request=MovieWriteSerializer,
        responses={201: MovieDetailSerializer, 400: {"description": "Invalid movie"}},
        examples=[
            OpenApiExample(
                "Movie",
                value={
                    "title": "Arrival",
                    "description": "A linguist is recruited to talk to visitors.",
                    "release_year": 2016,
                    "duration": 116,
                    "country": "USA",
                    "language": "English",
                    "genres": [1, 2],
                    "directors": [1],
                    "actors": [1, 2],
                },
                request_only=True,
            ),
        ],
        tags=["Admin"],
    )
    def post(self, request) -> Response:
        serializer = MovieWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid movie"), field_errors=serializer.errors
            )

        movie = self.movie_service.create_movie(
            serializer.validated_data, created_by=request.user
        )
        return APIResponse.created(
            message=_("Movie created"),
            data={"movie": MovieDetailSerializer(movie).data},
        )


class AdminMovieDetailView(APIView):
    """
    PUT    /api/admin/movies/<id>/
    DELETE /api/admin/movies/<id>/
    """

    permission_classes = [IsAdminUser]
    movie_service = MovieService()

    @extend_schema(
        summary="Update movie",
        description="Partial update; relation lists replace the current ones.",
        request=MovieWriteSerializer,
        responses={200: MovieDetailSerializer, 404: {"description": "Movie not found"}},
        tags=["Admin"],
    )
    def put(self, request, movie_id: int) -> Response:
        serializer = MovieWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Invalid movie"), field_errors=serializer.errors
            )

        try:
            movie = self.movie_service.update_movie(movie_id, serializer.validated_data)
            return APIResponse.updated(
                message=_("Movie updated"),
                data={"movie": MovieDetailSerializer(movie).data},
            )

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))

    @extend_schema(
        summary="Delete movie",
        description="Deletes the movie with its ratings, reviews and list entries.",
        responses={200: {"description": "Movie deleted"}},
        tags=["Admin"],
    )
    def delete(self, request, movie_id: int) -> Response:
        try:
            self.movie_service.delete_movie(movie_id)
            return APIResponse.deleted(message=_("Movie deleted"))

        except ResourceException as e:
            return APIResponse.not_found(message=str(e.detail))
