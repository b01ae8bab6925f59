"""
Reviews app serializers.
"""

from .review import (
    AdminReviewSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
    ReviewVisibilitySerializer,
    ReviewVoteSerializer,
)

__all__ = [
    "ReviewSerializer",
    "AdminReviewSerializer",
    "ReviewCreateSerializer",
    "ReviewUpdateSerializer",
    "ReviewVoteSerializer",
    "ReviewVisibilitySerializer",
]
