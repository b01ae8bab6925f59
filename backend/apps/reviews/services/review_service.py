"""
Review Service - Business logic for reviews, helpfulness votes and moderation.
"""

import logging
from typing import Any, Dict, Optional

from django.db import IntegrityError, transaction
from django.db.models import F

from apps.movies.models import Movie
from apps.ratings.services import RatingService
from core.constants import Messages, ReviewSortOption, VoteType
from core.exceptions import (
    BaseAPIException,
    ConflictException,
    DatabaseException,
    MovieNotFoundException,
    PermissionException,
    ReviewNotFoundException,
    ValidationException,
)
from core.pagination import paginate_queryset
from core.permissions import is_owner_or_admin

from ..models import Review, ReviewVote

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("rating", "content")


class ReviewService:
    """
    Service class for review operations.

    A review's embedded score is mirrored into the user's Rating for the
    movie, so the movie aggregate is always computed from Rating rows.
    """

    def __init__(self, rating_service: Optional[RatingService] = None):
        self.rating_service = rating_service or RatingService()

    # =========================================================================
    # AUTHOR OPERATIONS
    # =========================================================================

    def create_review(self, user, movie_id: int, rating: int, content: str) -> Review:
        """
        Review a movie once.

        Raises:
            MovieNotFoundException: Movie missing or inactive
            ConflictException: User already reviewed this movie
        """
        try:
            movie = Movie.objects.active().get(pk=movie_id)
        except Movie.DoesNotExist:
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

        try:
            with transaction.atomic():
                review = Review.objects.create(
                    user=user, movie=movie, rating=rating, content=content
                )
                self.rating_service.sync_review_rating(review)
        except IntegrityError:
            logger.warning(f"Duplicate review by user {user.id} on movie {movie.id}")
            raise ConflictException(Messages.REVIEW_ALREADY_EXISTS)

        logger.info(f"Review {review.id} created by user {user.id} on movie {movie.id}")
        return review

    def update_review(self, user, review_id: int, **fields) -> Review:
        """
        Edit the user's own review.

        Raises:
            ReviewNotFoundException: Review does not exist
            PermissionException: User is not the author
        """
        review = self.get_review(review_id)
        if review.user_id != user.id:
            raise PermissionException("You can only edit your own reviews")

        changes = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        try:
            with transaction.atomic():
                for field_name, value in changes.items():
                    setattr(review, field_name, value)
                review.mark_edited()
                review.save()

                if "rating" in changes:
                    self.rating_service.sync_review_rating(review)

            logger.info(f"Review {review.id} updated by user {user.id}")
            return review

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to update review {review_id}: {e}")
            raise DatabaseException(f"Error updating review: {e}")

    def delete_review(self, review_id: int, actor) -> Dict[str, Any]:
        """
        Delete a review and the rating it carried.

        The author or an admin may delete. The movie aggregate is recomputed
        from the remaining ratings.

        Returns:
            The recomputed movie aggregate
        """
        review = self.get_review(review_id)
        if not is_owner_or_admin(actor, review):
            raise PermissionException("You can only delete your own reviews")

        try:
            with transaction.atomic():
                user_id, movie_id = review.user_id, review.movie_id
                review.delete()
                aggregate = self.rating_service.discard_rating(user_id, movie_id)

            logger.info(f"Review {review_id} deleted by user {actor.id}")
            return aggregate

        except BaseAPIException:
            raise
        except Exception as e:
            logger.error(f"Failed to delete review {review_id}: {e}")
            raise DatabaseException(f"Error deleting review: {e}")

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_review(self, review_id: int) -> Review:
        try:
            return Review.objects.select_related("user", "movie").get(pk=review_id)
        except Review.DoesNotExist:
            raise ReviewNotFoundException(Messages.REVIEW_NOT_FOUND)

    def get_movie_reviews(
        self,
        movie_id: int,
        page=None,
        limit=None,
        sort: str = ReviewSortOption.NEWEST,
    ) -> Dict[str, Any]:
        """
        Paginated visible reviews of an active movie.

        Returns:
            Dict with ``reviews`` and ``pagination``
        """
        if not Movie.objects.active().filter(pk=movie_id).exists():
            raise MovieNotFoundException(Messages.MOVIE_NOT_FOUND)

        if sort not in ReviewSortOption.values:
            sort = ReviewSortOption.NEWEST

        try:
            queryset = Review.objects.visible_for_movie(movie_id).order_by(sort, "-id")
            reviews, pagination = paginate_queryset(queryset, page, limit)
            return {"reviews": reviews, "pagination": pagination}

        except Exception as e:
            logger.error(f"Failed to get reviews for movie {movie_id}: {e}")
            raise DatabaseException(f"Error getting movie reviews: {e}")

    # =========================================================================
    # VOTING
    # =========================================================================

    def vote_review(self, user, review_id: int, vote_type: str) -> Review:
        """
        Record a helpful or unhelpful vote.

        Raises:
            ValidationException: Unknown vote type
            PermissionException: Voting on one's own review
            ConflictException: User already voted on this review
        """
        if vote_type not in VoteType.values:
            raise ValidationException(
                "Invalid vote type",
                field_errors={"vote_type": [f"Choose one of: {', '.join(VoteType.values)}"]},
            )

        review = self.get_review(review_id)
        if review.is_hidden:
            raise ReviewNotFoundException(Messages.REVIEW_NOT_FOUND)
        if review.user_id == user.id:
            raise PermissionException(Messages.CANNOT_VOTE_OWN)

        counter = (
            "helpful_votes" if vote_type == VoteType.HELPFUL else "unhelpful_votes"
        )

        try:
            with transaction.atomic():
                ReviewVote.objects.create(user=user, review=review, vote_type=vote_type)
                Review.objects.filter(pk=review.pk).update(**{counter: F(counter) + 1})
        except IntegrityError:
            raise ConflictException(Messages.ALREADY_VOTED)

        review.refresh_from_db(fields=["helpful_votes", "unhelpful_votes"])
        logger.info(f"User {user.id} voted {vote_type} on review {review.id}")
        return review

    # =========================================================================
    # MODERATION
    # =========================================================================

    def list_reviews(
        self,
        is_hidden: Optional[bool] = None,
        movie_id: Optional[int] = None,
        user_id: Optional[int] = None,
        page=None,
        limit=None,
    ) -> Dict[str, Any]:
        """All reviews for moderators, optionally filtered."""
        queryset = Review.objects.select_related("user", "movie")
        if is_hidden is not None:
            queryset = queryset.filter(is_hidden=is_hidden)
        if movie_id is not None:
            queryset = queryset.filter(movie_id=movie_id)
        if user_id is not None:
            queryset = queryset.filter(user_id=user_id)

        try:
            reviews, pagination = paginate_queryset(
                queryset.order_by("-created_at", "-id"), page, limit
            )
            return {"reviews": reviews, "pagination": pagination}

        except Exception as e:
            logger.error(f"Failed to list reviews: {e}")
            raise DatabaseException(f"Error listing reviews: {e}")

    def set_visibility(self, review_id: int, is_hidden: bool) -> Review:
        review = self.get_review(review_id)
        review.is_hidden = is_hidden
        review.save(update_fields=["is_hidden", "updated_at"])

        logger.info(f"Review {review_id} {'hidden' if is_hidden else 'shown'}")
        return review
