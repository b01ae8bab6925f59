"""
Ratings app views.
"""

from .rating_views import MovieRatingStatsView, MovieRatingView, MyRatingsView

__all__ = ["MovieRatingView", "MovieRatingStatsView", "MyRatingsView"]
