"""
Managers for the model mixins.
"""

from django.db import models

from .querysets import ActiveQuerySet


class ActiveManager(models.Manager.from_queryset(ActiveQuerySet)):
    """
    Manager for models with ActiveMixin.

    Returns every record by default; callers narrow with ``active()``.
    """
