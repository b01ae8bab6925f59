"""
MovieList model - user-curated collections of movies.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins.models import TimeStampedMixin

from ..managers import MovieListManager


class MovieList(TimeStampedMixin):
    """Named collection of movies owned by a user."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="movie_lists",
        verbose_name=_("user"),
    )

    name = models.CharField(_("name"), max_length=100)

    description = models.TextField(
        _("description"), max_length=500, blank=True, default=""
    )

    is_public = models.BooleanField(_("is public"), default=True, db_index=True)

    movies = models.ManyToManyField(
        "movies.Movie", related_name="lists", blank=True, verbose_name=_("movies")
    )

    objects = MovieListManager()

    class Meta:
        db_table = "lists_movie_list"
        verbose_name = _("Movie list")
        verbose_name_plural = _("Movie lists")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"]),
            models.Index(fields=["is_public", "-created_at"]),
        ]

    def __str__(self):
        return self.name
