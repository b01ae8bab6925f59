"""
Movie model - Core catalog entity.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins.models import BaseModelMixin
from core.validators import validate_release_year

from ..managers import MovieManager


class Movie(BaseModelMixin):
    """
    Movie in the catalog.

    ``average_rating``, ``total_ratings`` and ``total_reviews`` are derived
    fields maintained by the rating aggregator; they are never written by
    catalog edits.

    Inherits from:
    - BaseModelMixin: created_at, updated_at, is_active
    """

    # Core Information
    title = models.CharField(
        _("title"), max_length=200, db_index=True, help_text=_("Movie title")
    )

    description = models.TextField(
        _("description"), max_length=2000, help_text=_("Plot summary")
    )

    release_year = models.PositiveIntegerField(
        _("release year"),
        db_index=True,
        validators=[validate_release_year],
    )

    duration = models.PositiveIntegerField(
        _("duration"),
        validators=[MinValueValidator(1)],
        help_text=_("Runtime in minutes"),
    )

    # Media
    poster_url = models.URLField(_("poster URL"), max_length=500, blank=True, default="")

    trailer_url = models.URLField(
        _("trailer URL"), max_length=500, blank=True, default=""
    )

    # Origin
    country = models.CharField(
        _("country"), max_length=100, blank=True, default="", db_index=True
    )

    language = models.CharField(
        _("language"), max_length=50, blank=True, default="", db_index=True
    )

    # Relationships
    genres = models.ManyToManyField(
        "Genre", related_name="movies", blank=True, verbose_name=_("genres")
    )

    directors = models.ManyToManyField(
        "Director", related_name="movies", blank=True, verbose_name=_("directors")
    )

    actors = models.ManyToManyField(
        "Actor", related_name="movies", blank=True, verbose_name=_("actors")
    )

    # Derived statistics
    average_rating = models.FloatField(
        _("average rating"),
        default=0.0,
        db_index=True,
        validators=[MinValueValidator(0.0), MaxValueValidator(10.0)],
    )

    total_ratings = models.PositiveIntegerField(_("total ratings"), default=0)

    total_reviews = models.PositiveIntegerField(_("total reviews"), default=0)

    views = models.PositiveIntegerField(_("views"), default=0, db_index=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="movies_created",
        verbose_name=_("created by"),
    )

    objects = MovieManager()

    class Meta:
        db_table = "movies_movie"
        verbose_name = _("Movie")
        verbose_name_plural = _("Movies")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active", "-average_rating"]),
            models.Index(fields=["is_active", "-views"]),
            models.Index(fields=["release_year", "is_active"]),
        ]

    def __str__(self):
        return f"{self.title} ({self.release_year})"

    def __repr__(self):
        return f"<Movie: {self.title} ({self.release_year})>"
