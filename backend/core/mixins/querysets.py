"""
QuerySets for the model mixins.
"""

from django.db import models


class ActiveQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)
