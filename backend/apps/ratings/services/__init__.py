"""
Ratings Services Module
"""

from .rating_service import RatingService

__all__ = ["RatingService"]
