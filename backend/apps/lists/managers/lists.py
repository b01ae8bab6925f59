"""
Custom managers for watchlist and movie list models.
"""

from django.db import models


class WatchlistManager(models.Manager):
    def for_user(self, user_id):
        return self.filter(user_id=user_id).select_related("movie")

    def movie_ids_for_user(self, user_id):
        return self.filter(user_id=user_id).values_list("movie_id", flat=True)


class MovieListManager(models.Manager):
    def public(self):
        return self.filter(is_public=True)

    def visible_to(self, user):
        """Public lists plus the user's own private ones."""
        if user is None or not user.is_authenticated:
            return self.public()
        return self.filter(models.Q(is_public=True) | models.Q(user=user))
