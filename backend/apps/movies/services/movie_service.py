"""
Movie Service - Core business logic for catalog operations.
"""

import logging
from typing import Any, Dict

from django.db import transaction
from django.db.models import F

from core.constants import Messages, SortOption
from core.exceptions import DatabaseException, MovieNotFoundException
from core.pagination import paginate_queryset

from ..models import Movie

logger = logging.getLogger(__name__)

RELATION_FIELDS = ("genres", "directors", "actors")


class MovieService:
    """
    Service class for movie-related operations.

    Responsibilities:
    - Paginated catalog listing
    - Movie detail lookups with view counting
    - Admin create, update and delete
    """

    # =========================================================================
    # CORE MOVIE RETRIEVAL OPERATIONS
    # =========================================================================

    def list_movies(
        self, page=None, limit=None, sort: str = SortOption.NEWEST
    ) -> Dict[str, Any]:
        """
        Paginated listing of active movies.

        Returns:
            Dict with ``movies`` and ``pagination``
        """
        if sort not in SortOption.values:
            sort = SortOption.NEWEST

        try:
            queryset = Movie.objects.with_relations().active().order_by(sort, "-id")
            movies, pagination = paginate_queryset(queryset, page, limit)
            return {"movies": movies, "pagination": pagination}

        except Exception as e:
            logger.error(f"Failed to list movies: {e}")
            raise DatabaseException(f"Movie listing error: {e}")

    def get_movie(self, movie_id: int, include_inactive: bool = False) -> Movie:
        """
        Get a movie by ID.

        Raises:
            MovieNotFoundException: Movie missing, or inactive for public lookups
        """
        queryset = Movie.objects.with_relations()
        if not include_inactive:
            queryset = queryset.active()

        try:
            return queryset.get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

    def get_movie_detail(self, movie_id: int) -> Movie:
        """Public detail lookup; counts one view."""
        movie = self.get_movie(movie_id)

        Movie.objects.filter(pk=movie.pk).update(views=F("views") + 1)
        movie.refresh_from_db(fields=["views"])

        logger.debug(f"Movie {movie_id} viewed ({movie.views} views)")
        return movie

    # =========================================================================
    # ADMIN OPERATIONS
    # =========================================================================

    @transaction.atomic
    def create_movie(self, data: Dict[str, Any], created_by=None) -> Movie:
        """
        Create a movie from validated serializer data.

        Args:
            data: Validated fields; relations given as model instances
            created_by: Admin creating the movie
        """
        data = dict(data)
        relations = {name: data.pop(name, None) for name in RELATION_FIELDS}

        movie = Movie.objects.create(created_by=created_by, **data)
        for name, values in relations.items():
            if values:
                getattr(movie, name).set(values)

        logger.info(f"Movie created: {movie.id} '{movie.title}'")
        return movie

    @transaction.atomic
    def update_movie(self, movie_id: int, data: Dict[str, Any]) -> Movie:
        """Apply validated field changes to a movie, active or not."""
        movie = self.get_movie(movie_id, include_inactive=True)

        data = dict(data)
        relations = {
            name: data.pop(name) for name in RELATION_FIELDS if name in data
        }

        for field_name, value in data.items():
            setattr(movie, field_name, value)
        movie.save()

        for name, values in relations.items():
            getattr(movie, name).set(values)

        logger.info(f"Movie updated: {movie.id}")
        return movie

    @transaction.atomic
    def delete_movie(self, movie_id: int) -> None:
        """Delete a movie with its ratings, reviews and watchlist entries."""
        movie = self.get_movie(movie_id, include_inactive=True)
        movie.delete()
        logger.info(f"Movie deleted: {movie_id}")

