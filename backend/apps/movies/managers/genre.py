"""
Custom manager for the Genre model.
"""

from django.db import models


class GenreManager(models.Manager):
    def by_name(self, term):
        """Case-insensitive substring match on name."""
        return self.filter(name__icontains=term)
