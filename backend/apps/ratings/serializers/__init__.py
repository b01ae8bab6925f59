"""
Ratings app serializers.
"""

from .rating import (
    RatingInputSerializer,
    RatingSerializer,
    RatingStatsSerializer,
    UserRatingSerializer,
)

__all__ = [
    "RatingInputSerializer",
    "RatingSerializer",
    "RatingStatsSerializer",
    "UserRatingSerializer",
]
