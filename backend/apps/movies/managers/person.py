"""
Shared manager for Actor and Director.
"""

from django.db import models


class PersonManager(models.Manager):
    def by_name(self, term):
        """Case-insensitive substring match on name."""
        return self.filter(name__icontains=term)
