"""
Ratings app managers.
"""

from .rating import RatingManager

__all__ = ["RatingManager"]
