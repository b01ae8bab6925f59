"""
List Service - watchlist and user-curated movie lists.
"""

import logging
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction

from apps.movies.models import Movie
from core.constants import Messages
from core.exceptions import (
    BaseAPIException,
    ConflictException,
    DatabaseException,
    ListNotFoundException,
    MovieNotFoundException,
    NotFoundException,
    PermissionException,
    ValidationException,
)
from core.pagination import paginate_queryset

from ..models import MovieList, Watchlist

logger = logging.getLogger(__name__)

LIST_FIELDS = ("name", "description", "is_public")


class ListService:
    """
    Service class for watchlist and movie list operations.
    """

    # =========================================================================
    # WATCHLIST
    # =========================================================================

    def add_to_watchlist(self, user, movie_id: int) -> Watchlist:
        """
        Save a movie to the user's watchlist.

        Raises:
            MovieNotFoundException: Movie missing or inactive
            ConflictException: Movie already in the watchlist
        """
        try:
            movie = Movie.objects.active().get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

        try:
            with transaction.atomic():
                entry = Watchlist.objects.create(user=user, movie=movie)
        except IntegrityError:
            raise ConflictException(Messages.ALREADY_IN_WATCHLIST)

        logger.info(f"User {user.id} added movie {movie.id} to watchlist")
        return entry

    def remove_from_watchlist(self, user, movie_id: int) -> None:
        deleted, _ = Watchlist.objects.filter(user=user, movie_id=movie_id).delete()
        if not deleted:
            raise NotFoundException(Messages.NOT_IN_WATCHLIST)

        logger.info(f"User {user.id} removed movie {movie_id} from watchlist")

    def get_watchlist(self, user_id: int, page=None, limit=None) -> Dict[str, Any]:
        """
        Paginated watchlist, most recently added first.

        Returns:
            Dict with ``watchlist`` and ``pagination``
        """
        try:
            queryset = Watchlist.objects.for_user(user_id).order_by("-added_at", "-id")
            entries, pagination = paginate_queryset(queryset, page, limit)
            return {"watchlist": entries, "pagination": pagination}

        except Exception as e:
            logger.error(f"Failed to get watchlist for user {user_id}: {e}")
            raise DatabaseException(f"Error getting watchlist: {e}")

    # =========================================================================
    # CUSTOM LISTS
    # =========================================================================

    def create_list(
        self,
        user,
        name: str,
        description: str = "",
        is_public: bool = True,
        movie_ids: Optional[List[int]] = None,
    ) -> MovieList:
        """Create a list owned by ``user``, optionally seeded with movies."""
        movies = self._resolve_movies(movie_ids or [])

        try:
            with transaction.atomic():
                movie_list = MovieList.objects.create(
                    user=user, name=name, description=description, is_public=is_public
                )
                if movies:
                    movie_list.movies.set(movies)

            logger.info(f"User {user.id} created list {movie_list.id}")
            return movie_list

        except Exception as e:
            logger.error(f"Failed to create list for user {user.id}: {e}")
            raise DatabaseException(f"Error creating list: {e}")

    def update_list(self, user, list_id: int, **fields) -> MovieList:
        """
        Update the owner's list. ``movie_ids`` replaces the list's movies.

        Raises:
            ListNotFoundException: List not visible to the user
            PermissionException: User does not own the list
        """
        movie_list = self._get_owned_list(user, list_id)
        movie_ids = fields.pop("movie_ids", None)
        movies = self._resolve_movies(movie_ids) if movie_ids is not None else None

        try:
            with transaction.atomic():
                for field_name in LIST_FIELDS:
                    if field_name in fields:
                        setattr(movie_list, field_name, fields[field_name])
                movie_list.save()

                if movies is not None:
                    movie_list.movies.set(movies)

            logger.info(f"User {user.id} updated list {list_id}")
            return movie_list

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to update list {list_id}: {e}")
            raise DatabaseException(f"Error updating list: {e}")

    def delete_list(self, user, list_id: int) -> None:
        movie_list = self._get_owned_list(user, list_id)
        movie_list.delete()
        logger.info(f"User {user.id} deleted list {list_id}")

    def get_list(self, list_id: int, user=None) -> MovieList:
        """
        Get a list visible to ``user``.

        Private lists of other users look like missing lists.
        """
        try:
            return (
                MovieList.objects.visible_to(user)
                .select_related("user")
                .prefetch_related("movies")
                .get(pk=list_id)
            )
        except MovieList.DoesNotExist:
            raise ListNotFoundException(Messages.LIST_NOT_FOUND)

    def get_public_lists(self, page=None, limit=None) -> Dict[str, Any]:
        queryset = (
            MovieList.objects.public()
            .select_related("user")
            .prefetch_related("movies")
            .order_by("-created_at", "-id")
        )
        lists, pagination = paginate_queryset(queryset, page, limit)
        return {"lists": lists, "pagination": pagination}

    def get_user_lists(
        self, owner_id: int, viewer=None, page=None, limit=None
    ) -> Dict[str, Any]:
        """A user's lists; private ones only when the viewer is the owner."""
        queryset = MovieList.objects.filter(user_id=owner_id)
        if viewer is None or not viewer.is_authenticated or viewer.id != owner_id:
            queryset = queryset.filter(is_public=True)

        queryset = (
            queryset.select_related("user")
            .prefetch_related("movies")
            .order_by("-created_at", "-id")
        )
        lists, pagination = paginate_queryset(queryset, page, limit)
        return {"lists": lists, "pagination": pagination}

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _get_owned_list(self, user, list_id: int) -> MovieList:
        movie_list = self.get_list(list_id, user)
        if movie_list.user_id != user.id:
            raise PermissionException("You can only modify your own lists")
        return movie_list

    def _resolve_movies(self, movie_ids: List[int]) -> List[Movie]:
        """Active movies for the given IDs; any unknown ID is an error."""
        unique_ids = set(movie_ids)
        movies = list(Movie.objects.active().filter(pk__in=unique_ids))

        missing = unique_ids - {movie.id for movie in movies}
        if missing:
            raise ValidationException(
                "Unknown movies",
                field_errors={
                    "movie_ids": [f"Movie {pk} not found" for pk in sorted(missing)]
                },
            )
        return movies
