"""
Project-wide constants and enums for consistent usage across the application.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

# ================================================================
# AUTHENTICATION CONSTANTS
# ================================================================


class UserRole(models.TextChoices):
    """User roles for access control."""

    USER = "user", _("Regular User")
    ADMIN = "admin", _("Administrator")


# ================================================================
# RATINGS & REVIEWS
# ================================================================


class RatingScale:
    """Inclusive bounds of the 1-10 score scale."""

    MIN = 1
    MAX = 10


# Ratings at or above this score feed personalized recommendations
HIGH_RATING_THRESHOLD = 7

# Candidates need this many ratings before they are recommended
MIN_RATINGS_FOR_RECOMMENDATION = 5


class VoteType(models.TextChoices):
    """Review helpfulness votes."""

    HELPFUL = "helpful", _("Helpful")
    UNHELPFUL = "unhelpful", _("Unhelpful")


# ================================================================
# MOVIE CATALOG
# ================================================================


class SortOption(models.TextChoices):
    """Sort keys accepted by movie listings."""

    NEWEST = "-created_at", _("Newest")
    OLDEST = "created_at", _("Oldest")
    HIGHEST_RATED = "-average_rating", _("Highest Rated")
    LOWEST_RATED = "average_rating", _("Lowest Rated")
    MOST_REVIEWED = "-total_reviews", _("Most Reviewed")
    MOST_VIEWED = "-views", _("Most Viewed")
    TITLE_ASC = "title", _("Title (A-Z)")
    TITLE_DESC = "-title", _("Title (Z-A)")
    YEAR_ASC = "release_year", _("Release Year (Oldest)")
    YEAR_DESC = "-release_year", _("Release Year (Newest)")


DEFAULT_MOVIE_SORT = SortOption.HIGHEST_RATED


class RatingSortOption(models.TextChoices):
    """Sort keys accepted by rating listings."""

    NEWEST = "-created_at", _("Newest")
    OLDEST = "created_at", _("Oldest")
    HIGHEST_SCORE = "-score", _("Highest Score")
    LOWEST_SCORE = "score", _("Lowest Score")


class ReviewSortOption(models.TextChoices):
    """Sort keys accepted by review listings."""

    NEWEST = "-created_at", _("Newest")
    OLDEST = "created_at", _("Oldest")
    MOST_HELPFUL = "-helpful_votes", _("Most Helpful")
    HIGHEST_RATING = "-rating", _("Highest Rating")
    LOWEST_RATING = "rating", _("Lowest Rating")


# ================================================================
# RESPONSE MESSAGES
# ================================================================


class Messages:
    """User-facing response messages."""

    SUCCESS = _("Operation successful")
    CREATED = _("Resource created successfully")
    UPDATED = _("Resource updated successfully")
    DELETED = _("Resource deleted successfully")

    LOGIN_SUCCESS = _("Login successful")
    LOGOUT_SUCCESS = _("Logout successful")
    REGISTER_SUCCESS = _("Registration successful")

    NOT_FOUND = _("Resource not found")
    UNAUTHORIZED = _("Not authorized to access this resource")
    FORBIDDEN = _("Access denied")
    VALIDATION_ERROR = _("Validation failed")
    SERVER_ERROR = _("Internal server error")

    USER_NOT_FOUND = _("User not found")
    EMAIL_TAKEN = _("Email already registered")
    USERNAME_TAKEN = _("Username already taken")
    INVALID_CREDENTIALS = _("Invalid email or password")
    ACCOUNT_DEACTIVATED = _("Your account has been deactivated")

    MOVIE_NOT_FOUND = _("Movie not found")

    REVIEW_NOT_FOUND = _("Review not found")
    REVIEW_ALREADY_EXISTS = _("You have already reviewed this movie")
    ALREADY_VOTED = _("You have already voted on this review")
    CANNOT_VOTE_OWN = _("You cannot vote on your own review")

    RATING_NOT_FOUND = _("Rating not found")
    RATING_ALREADY_EXISTS = _("You have already rated this movie")
    RATING_HELD_BY_REVIEW = _(
        "This rating belongs to your review. Delete the review to remove it"
    )

    LIST_NOT_FOUND = _("List not found")

    ALREADY_IN_WATCHLIST = _("Movie already in watchlist")
    NOT_IN_WATCHLIST = _("Movie not in watchlist")
