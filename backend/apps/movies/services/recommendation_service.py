"""
Recommendation Service - Business logic for movie recommendations.
"""

import logging
from typing import Any, Dict, List, Optional

from django.db.models import Q

from apps.lists.models import Watchlist
from apps.ratings.models import Rating
from core.constants import (
    DEFAULT_MOVIE_SORT,
    HIGH_RATING_THRESHOLD,
    MIN_RATINGS_FOR_RECOMMENDATION,
    Messages,
    SortOption,
)
from core.exceptions import (
    BaseAPIException,
    DatabaseException,
    MovieNotFoundException,
    ValidationException,
)

from ..models import Movie

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Service class for movie recommendation operations.

    Every list is built from the materialized ``average_rating``,
    ``total_ratings`` and ``views`` fields kept up to date by the rating
    aggregator.
    """

    HOMEPAGE_SECTION_SIZE = 10

    # =========================================================================
    # POPULARITY LISTS
    # =========================================================================

    def get_trending_movies(self, limit: int = 10) -> List[Movie]:
        """
        Get trending movies: most viewed first, ties broken by rating.

        Args:
            limit: Maximum number of movies

        Returns:
            List of Movie instances
        """
        self._validate_limit(limit)

        try:
            return list(Movie.objects.trending()[:limit])
        except Exception as e:
            logger.error(f"Failed to get trending movies: {e}")
            raise DatabaseException(f"Trending movies error: {e}")

    def get_top_rated_movies(
        self, limit: int = 10, min_ratings: int = 10
    ) -> List[Movie]:
        """
        Get the best rated movies among those with enough ratings.

        Args:
            limit: Maximum number of movies
            min_ratings: Minimum ``total_ratings`` a movie needs to qualify
        """
        self._validate_limit(limit)

        try:
            return list(Movie.objects.top_rated(min_ratings=min_ratings)[:limit])
        except Exception as e:
            logger.error(f"Failed to get top rated movies: {e}")
            raise DatabaseException(f"Top rated movies error: {e}")

    def get_movies_by_genre(
        self, genre_id: int, limit: int = 20, sort: str = DEFAULT_MOVIE_SORT
    ) -> List[Movie]:
        """Active movies of one genre, sorted and limited."""
        self._validate_limit(limit)
        if sort not in SortOption.values:
            sort = DEFAULT_MOVIE_SORT

        try:
            return list(Movie.objects.by_genre(genre_id).order_by(sort, "-id")[:limit])
        except Exception as e:
            logger.error(f"Failed to get movies for genre {genre_id}: {e}")
            raise DatabaseException(f"Movies by genre error: {e}")

    # =========================================================================
    # SIMILARITY
    # =========================================================================

    def get_similar_movies(self, movie_id: int, limit: int = 10) -> List[Movie]:
        """
        Get active movies sharing at least one genre with the given movie.

        Args:
            movie_id: Reference movie's database ID
            limit: Maximum number of similar movies

        Raises:
            MovieNotFoundException: Reference movie does not exist
        """
        self._validate_limit(limit)
        logger.info(f"Getting {limit} similar movies for movie ID {movie_id}")

        try:
            movie = self._get_movie(movie_id)
            genre_ids = list(movie.genres.values_list("id", flat=True))

            return list(
                Movie.objects.by_genre(genre_ids)
                .exclude(pk=movie.pk)
                .order_by("-average_rating", "-id")[:limit]
            )

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to get similar movies for {movie_id}: {e}")
            raise DatabaseException(f"Similar movies error: {e}")

    def get_because_you_watched_recommendations(
        self, user_id: int, movie_id: int, limit: int = 10
    ) -> List[Movie]:
        """
        Movies sharing a genre or a director with a movie the user watched.

        Excludes the reference movie and everything the user already rated.
        """
        self._validate_limit(limit)

        try:
            movie = self._get_movie(movie_id)
            genre_ids = list(movie.genres.values_list("id", flat=True))
            director_ids = list(movie.directors.values_list("id", flat=True))
            rated_ids = list(Rating.objects.rated_movie_ids(user_id))

            return list(
                Movie.objects.with_relations()
                .active()
                .filter(
                    Q(genres__id__in=genre_ids) | Q(directors__id__in=director_ids)
                )
                .exclude(pk__in=rated_ids + [movie.pk])
                .distinct()
                .order_by("-average_rating", "-id")[:limit]
            )

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed because-you-watched for user {user_id}: {e}")
            raise DatabaseException(f"Because you watched recommendations error: {e}")

    # =========================================================================
    # PERSONALIZATION
    # =========================================================================

    def get_personalized_recommendations(
        self, user_id: int, limit: int = 10
    ) -> List[Movie]:
        """
        Genre-affinity recommendations from the user's highly rated movies.

        Collects the genres of movies the user scored at or above the high
        rating threshold and returns well-rated active movies in those genres
        that the user has neither rated nor saved to their watchlist. Users
        without such ratings get the trending list.
        """
        self._validate_limit(limit)

        try:
            liked_movie_ids = list(
                Rating.objects.high_scores_for_user(
                    user_id, HIGH_RATING_THRESHOLD
                ).values_list("movie_id", flat=True)
            )

            if not liked_movie_ids:
                logger.info(f"No high ratings for user {user_id}, using trending")
                return self.get_trending_movies(limit)

            genre_ids = set(
                Movie.genres.through.objects.filter(
                    movie_id__in=liked_movie_ids
                ).values_list("genre_id", flat=True)
            )

            excluded_ids = set(Rating.objects.rated_movie_ids(user_id))
            excluded_ids.update(Watchlist.objects.movie_ids_for_user(user_id))

            recommendations = list(
                Movie.objects.by_genre(list(genre_ids))
                .filter(total_ratings__gte=MIN_RATINGS_FOR_RECOMMENDATION)
                .exclude(pk__in=excluded_ids)
                .order_by("-average_rating", "-total_ratings", "-id")[:limit]
            )

            logger.info(
                f"Generated {len(recommendations)} personalized recommendations "
                f"for user {user_id}"
            )
            return recommendations

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed personalized recommendations for {user_id}: {e}")
            raise DatabaseException(f"Personalized recommendations error: {e}")

    def get_homepage_recommendations(
        self, user_id: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Assemble the homepage sections.

        Returns:
            Dict with ``trending``, ``top_rated`` and ``recently_added`` lists,
            plus ``for_you`` when a user is given
        """
        size = self.HOMEPAGE_SECTION_SIZE

        try:
            sections = {
                "trending": self.get_trending_movies(size),
                "top_rated": self.get_top_rated_movies(size),
                "recently_added": list(Movie.objects.recently_added()[:size]),
            }

            if user_id is not None:
                sections["for_you"] = self.get_personalized_recommendations(
                    user_id, size
                )

            return sections

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to build homepage recommendations: {e}")
            raise DatabaseException(f"Homepage recommendations error: {e}")

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _validate_limit(self, limit: int) -> None:
        if limit <= 0:
            raise ValidationException("Limit must be positive")

    def _get_movie(self, movie_id: int) -> Movie:
        try:
            return Movie.objects.get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)
