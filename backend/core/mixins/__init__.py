"""
Core mixins package for FilmRate.
Provides reusable model, manager and serializer mixins.
"""

from .managers import ActiveManager
from .models import ActiveMixin, BaseModelMixin, TimeStampedMixin
from .querysets import ActiveQuerySet
from .serializers import PasswordValidationMixin, TimestampMixin

__all__ = [
    # Model mixins
    "TimeStampedMixin",
    "ActiveMixin",
    "BaseModelMixin",
    # Managers
    "ActiveManager",
    # QuerySets
    "ActiveQuerySet",
    # Serializer mixins
    "TimestampMixin",
    "PasswordValidationMixin",
]
