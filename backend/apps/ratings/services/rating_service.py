"""
Rating Service - aggregation and CRUD for user ratings.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count

from apps.movies.models import Movie
from apps.reviews.models import Review
from core.constants import Messages, RatingScale, RatingSortOption
from core.exceptions import (
    BaseAPIException,
    ConflictException,
    DatabaseException,
    MovieNotFoundException,
    NotFoundException,
    ValidationException,
)
from core.pagination import paginate_queryset
from core.validators import validate_rating_score

from ..models import Rating

logger = logging.getLogger(__name__)


class RatingService:
    """
    Service class for rating operations.

    Responsibilities:
    - Recompute a movie's average rating and rating count from its ratings
    - Score distributions and per-user lookups
    - Create, update and delete a user's rating
    """

    # =========================================================================
    # AGGREGATION
    # =========================================================================

    @staticmethod
    def round_average(total: int, count: int) -> float:
        """Mean rounded to one decimal, halves rounded up."""
        mean = Decimal(total) / Decimal(count)
        return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def calculate_average_rating(self, movie_id: int) -> Dict[str, Any]:
        """
        Recompute and store a movie's average rating and counts.

        Args:
            movie_id: Movie database ID

        Returns:
            Dict with ``average_rating`` and ``total_ratings``
        """
        try:
            with transaction.atomic():
                scores = list(
                    Rating.objects.for_movie(movie_id).values_list("score", flat=True)
                )
                total_ratings = len(scores)
                average_rating = (
                    self.round_average(sum(scores), total_ratings)
                    if total_ratings
                    else 0.0
                )
                total_reviews = Review.objects.filter(movie_id=movie_id).count()

                Movie.objects.filter(pk=movie_id).update(
                    average_rating=average_rating,
                    total_ratings=total_ratings,
                    total_reviews=total_reviews,
                )

            logger.info(
                f"Movie {movie_id} aggregate: {average_rating} "
                f"from {total_ratings} ratings"
            )
            return {"average_rating": average_rating, "total_ratings": total_ratings}

        except Exception as e:
            logger.error(f"Failed to calculate average rating for movie {movie_id}: {e}")
            raise DatabaseException(f"Error calculating average rating: {e}")

    def get_rating_distribution(self, movie_id: int) -> Dict[int, int]:
        """
        Count ratings per score.

        Returns:
            Dense mapping with keys 1..10; scores nobody gave map to 0
        """
        try:
            distribution = {
                score: 0 for score in range(RatingScale.MIN, RatingScale.MAX + 1)
            }
            rows = (
                Rating.objects.for_movie(movie_id)
                .values("score")
                .annotate(count=Count("id"))
            )
            for row in rows:
                distribution[row["score"]] = row["count"]

            return distribution

        except Exception as e:
            logger.error(f"Failed to get rating distribution for movie {movie_id}: {e}")
            raise DatabaseException(f"Error getting rating distribution: {e}")

    def get_rating_stats(self, movie_id: int) -> Dict[str, Any]:
        """Stored aggregate for a movie plus its score distribution."""
        try:
            movie = Movie.objects.get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

        return {
            "movie_id": movie.id,
            "average_rating": movie.average_rating,
            "total_ratings": movie.total_ratings,
            "distribution": self.get_rating_distribution(movie.id),
        }

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def get_user_rating(self, user_id: int, movie_id: int) -> Optional[Rating]:
        """Return the user's rating for a movie, or None."""
        return Rating.objects.filter(user_id=user_id, movie_id=movie_id).first()

    def get_user_ratings(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 20,
        sort: str = RatingSortOption.NEWEST,
    ) -> Dict[str, Any]:
        """
        Paginated ratings of a user with movie details attached.

        Unknown sort keys fall back to newest first.
        """
        if sort not in RatingSortOption.values:
            sort = RatingSortOption.NEWEST

        try:
            queryset = (
                Rating.objects.for_user(user_id)
                .select_related("movie")
                .order_by(sort, "-id")
            )
            ratings, pagination = paginate_queryset(queryset, page, limit)
            return {"ratings": ratings, "pagination": pagination}

        except Exception as e:
            logger.error(f"Failed to get ratings for user {user_id}: {e}")
            raise DatabaseException(f"Error getting user ratings: {e}")

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def create_rating(self, user, movie_id: int, score: int) -> Rating:
        """
        Rate a movie once.

        Raises:
            MovieNotFoundException: Movie missing or inactive
            ConflictException: User already rated this movie
        """
        self._validate_score(score)
        movie = self._get_active_movie(movie_id)

        try:
            with transaction.atomic():
                rating = Rating.objects.create(user=user, movie=movie, score=score)
                self.calculate_average_rating(movie.id)
        except IntegrityError:
            logger.warning(f"Duplicate rating by user {user.id} on movie {movie.id}")
            raise ConflictException(Messages.RATING_ALREADY_EXISTS)

        logger.info(f"User {user.id} rated movie {movie.id}: {score}")
        return rating

    def update_rating(self, user, movie_id: int, score: int) -> Rating:
        """
        Change the user's existing score for a movie.

        A review by the same user on the movie takes the new score too.
        """
        self._validate_score(score)

        try:
            with transaction.atomic():
                rating = self._get_user_rating_or_404(user.id, movie_id)
                rating.score = score
                rating.save(update_fields=["score", "updated_at"])
                Review.objects.filter(user_id=user.id, movie_id=movie_id).update(
                    rating=score
                )
                self.calculate_average_rating(movie_id)

            logger.info(f"User {user.id} updated rating on movie {movie_id}: {score}")
            return rating

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to update rating: {e}")
            raise DatabaseException(f"Error updating rating: {e}")

    def delete_rating(self, user, movie_id: int) -> Dict[str, Any]:
        """
        Remove the user's rating and recompute the aggregate.

        Raises:
            ConflictException: The rating is carried by the user's review
        """
        try:
            with transaction.atomic():
                rating = self._get_user_rating_or_404(user.id, movie_id)
                if Review.objects.filter(user_id=user.id, movie_id=movie_id).exists():
                    raise ConflictException(Messages.RATING_HELD_BY_REVIEW)
                rating.delete()
                aggregate = self.calculate_average_rating(movie_id)

            logger.info(f"User {user.id} deleted rating on movie {movie_id}")
            return aggregate

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to delete rating: {e}")
            raise DatabaseException(f"Error deleting rating: {e}")

    def sync_review_rating(self, review) -> Rating:
        """Upsert the rating carried by a review and recompute."""
        with transaction.atomic():
            rating, created = Rating.objects.update_or_create(
                user_id=review.user_id,
                movie_id=review.movie_id,
                defaults={"score": review.rating},
            )
            self.calculate_average_rating(review.movie_id)

        logger.debug(
            f"{'Created' if created else 'Updated'} rating from review {review.id}"
        )
        return rating

    def discard_rating(self, user_id: int, movie_id: int) -> Dict[str, Any]:
        """Delete the (user, movie) rating if present and recompute."""
        with transaction.atomic():
            Rating.objects.filter(user_id=user_id, movie_id=movie_id).delete()
            return self.calculate_average_rating(movie_id)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _validate_score(self, score) -> None:
        try:
            validate_rating_score(score)
        except DjangoValidationError as e:
            raise ValidationException(
                e.messages[0], field_errors={"score": e.messages}
            )

    def _get_active_movie(self, movie_id: int) -> Movie:
        try:
            return Movie.objects.active().get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

    def _get_user_rating_or_404(self, user_id: int, movie_id: int) -> Rating:
        rating = self.get_user_rating(user_id, movie_id)
        if rating is None:
            raise NotFoundException(Messages.RATING_NOT_FOUND)
        return rating
