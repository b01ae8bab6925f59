"""
Reviews app views.
"""

from .admin_views import (
    AdminReviewDeleteView,
    AdminReviewListView,
    AdminReviewVisibilityView,
)
from .review_views import (
    MovieReviewsView,
    ReviewCreateView,
    ReviewDetailView,
    ReviewVoteView,
)

__all__ = [
    # Public
    "ReviewCreateView",
    "ReviewDetailView",
    "ReviewVoteView",
    "MovieReviewsView",
    # Admin
    "AdminReviewListView",
    "AdminReviewVisibilityView",
    "AdminReviewDeleteView",
]
