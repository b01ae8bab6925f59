"""
Admin management service for FilmRate.
Handles user management and dashboard statistics.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import transaction
from django.db.models import Count, F
from django.utils.translation import gettext_lazy as _

from apps.lists.models import MovieList
from apps.movies.models import Movie
from apps.ratings.models import Rating
from apps.ratings.services import RatingService
from apps.reviews.models import Review, ReviewVote
from core.constants import (
    MIN_RATINGS_FOR_RECOMMENDATION,
    Messages,
    UserRole,
    VoteType,
)
from core.exceptions import (
    PermissionException,
    UserNotFoundException,
    ValidationException,
)
from core.pagination import paginate_queryset

# Type hints only
if TYPE_CHECKING:
    from ..models import User
else:
    from django.contrib.auth import get_user_model

    User = get_user_model()

logger = logging.getLogger(__name__)

DASHBOARD_RECENT_COUNT = 5
DASHBOARD_TOP_MOVIES = 10


class AdminService:
    """
    Admin management service.
    Handles user listing, role and status changes, deletion and statistics.
    """

    @staticmethod
    def list_users(
        search: Optional[str] = None,
        role: Optional[str] = None,
        is_active: Optional[bool] = None,
        page=None,
        limit=None,
    ) -> Dict[str, Any]:
        """
        Paginated users, newest first.

        Args:
            search: Matched against username and email
            role: Exact role filter
            is_active: Account status filter
        """
        queryset = User.objects.all()

        if search:
            queryset = User.objects.search(search.strip())
        if role:
            if role not in UserRole.values:
                raise ValidationException(
                    _("Invalid role"),
                    field_errors={"role": [f"Choose one of: {', '.join(UserRole.values)}"]},
                )
            queryset = queryset.filter(role=role)
        if is_active is not None:
            queryset = queryset.filter(is_active=is_active)

        users, pagination = paginate_queryset(
            queryset.order_by("-date_joined", "-id"), page, limit
        )
        return {"users": users, "pagination": pagination}

    @staticmethod
    def get_user_detail(user_id: int) -> "User":
        """User with review, rating and list counts annotated."""
        try:
            return User.objects.annotate(
                review_count=Count("reviews", distinct=True),
                rating_count=Count("ratings", distinct=True),
                list_count=Count("movie_lists", distinct=True),
            ).get(pk=user_id)
        except User.DoesNotExist:
            raise UserNotFoundException(Messages.USER_NOT_FOUND)

    @staticmethod
    def change_role(actor: "User", user_id: int, role: str) -> "User":
        """
        Set a user's role.

        Raises:
            PermissionException: An admin tried to demote themselves
        """
        user = AdminService._get_user(user_id)

        if user.pk == actor.pk and role != UserRole.ADMIN:
            raise PermissionException(_("You cannot remove your own admin role"))

        user.role = role
        if role == UserRole.USER and not user.is_superuser:
            user.is_staff = False
        user.save()

        logger.info(f"User {user.email} role set to {role} by {actor.email}")
        return user

    @staticmethod
    def change_status(actor: "User", user_id: int, is_active: bool) -> "User":
        user = AdminService._get_user(user_id)

        if user.pk == actor.pk and not is_active:
            raise PermissionException(_("You cannot deactivate your own account"))

        user.is_active = is_active
        user.save(update_fields=["is_active", "updated_at"])

        logger.info(
            f"User {user.email} {'activated' if is_active else 'deactivated'} "
            f"by {actor.email}"
        )
        return user

    @staticmethod
    @transaction.atomic
    def delete_user(actor: "User", user_id: int) -> None:
        """
        Delete a user and everything they own.

        Movies the user rated or reviewed have their aggregates recomputed, and
        the vote counters on reviews the user voted on are decremented.

        Raises:
            PermissionException: An admin tried to delete themselves
        """
        user = AdminService._get_user(user_id)

        if user.pk == actor.pk:
            raise PermissionException(_("You cannot delete your own account"))

        affected_movie_ids = set(
            Rating.objects.for_user(user.pk).values_list("movie_id", flat=True)
        )
        affected_movie_ids.update(
            Review.objects.filter(user_id=user.pk).values_list("movie_id", flat=True)
        )

        AdminService._withdraw_votes(user.pk)

        email = user.email
        user.delete()

        rating_service = RatingService()
        for movie_id in affected_movie_ids:
            rating_service.calculate_average_rating(movie_id)

        logger.info(f"User {email} deleted by {actor.email}")

    @staticmethod
    def get_dashboard_stats() -> Dict[str, Any]:
        """
        Site totals plus recent activity.

        Returns:
            Dict with ``totals``, ``recent_users``, ``recent_reviews`` and
            ``top_movies``
        """
        return {
            "totals": {
                "users": User.objects.count(),
                "active_users": User.objects.filter(is_active=True).count(),
                "movies": Movie.objects.count(),
                "active_movies": Movie.objects.active().count(),
                "reviews": Review.objects.count(),
                "hidden_reviews": Review.objects.filter(is_hidden=True).count(),
                "ratings": Rating.objects.count(),
                "lists": MovieList.objects.count(),
            },
            "recent_users": list(
                User.objects.order_by("-date_joined", "-id")[:DASHBOARD_RECENT_COUNT]
            ),
            "recent_reviews": list(
                Review.objects.select_related("user", "movie").order_by(
                    "-created_at", "-id"
                )[:DASHBOARD_RECENT_COUNT]
            ),
            "top_movies": list(
                Movie.objects.top_rated(min_ratings=MIN_RATINGS_FOR_RECOMMENDATION)[
                    :DASHBOARD_TOP_MOVIES
                ]
            ),
        }

    # ================================================================
    # HELPER METHODS (Private)
    # ================================================================

    @staticmethod
    def _get_user(user_id: int) -> "User":
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise UserNotFoundException(Messages.USER_NOT_FOUND)

    @staticmethod
    def _withdraw_votes(user_id: int) -> None:
        """Take the user's votes off the counters of other users' reviews."""
        votes = (
            ReviewVote.objects.filter(user_id=user_id)
            .exclude(review__user_id=user_id)
            .values_list("review_id", "vote_type")
        )
        for review_id, vote_type in votes:
            counter = (
                "helpful_votes" if vote_type == VoteType.HELPFUL else "unhelpful_votes"
            )
            Review.objects.filter(pk=review_id).update(**{counter: F(counter) - 1})
