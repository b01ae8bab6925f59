"""
Custom manager for the Review model.
"""

from django.db import models


class ReviewManager(models.Manager):
    def visible(self):
        """Reviews not hidden by moderation."""
        return self.filter(is_hidden=False)

    def visible_for_movie(self, movie_id):
        return self.visible().filter(movie_id=movie_id).select_related("user")
