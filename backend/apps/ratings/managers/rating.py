"""
Custom manager for the Rating model.
"""

from django.db import models

from core.constants import HIGH_RATING_THRESHOLD


class RatingManager(models.Manager):
    def for_movie(self, movie_id):
        return self.filter(movie_id=movie_id)

    def for_user(self, user_id):
        return self.filter(user_id=user_id)

    def high_scores_for_user(self, user_id, threshold=HIGH_RATING_THRESHOLD):
        """Ratings by the user at or above the threshold."""
        return self.filter(user_id=user_id, score__gte=threshold)

    def rated_movie_ids(self, user_id):
        return self.filter(user_id=user_id).values_list("movie_id", flat=True)
