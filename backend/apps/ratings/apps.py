"""
Ratings app configuration for FilmRate.
"""

from django.apps import AppConfig


class RatingsConfig(AppConfig):
    """Configuration for the ratings app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.ratings"
    label = "ratings"
    verbose_name = "Ratings"
