"""
Lists app configuration for FilmRate.
"""

from django.apps import AppConfig


class ListsConfig(AppConfig):
    """Configuration for the lists app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.lists"
    label = "lists"
    verbose_name = "Lists"
