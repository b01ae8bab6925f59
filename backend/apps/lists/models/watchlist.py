"""
Watchlist model - movies a user saved for later.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins.models import TimeStampedMixin

from ..managers import WatchlistManager


class Watchlist(TimeStampedMixin):
    """
    One saved movie in a user's watchlist. At most one per (user, movie).
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="watchlist",
        verbose_name=_("user"),
    )

    movie = models.ForeignKey(
        "movies.Movie",
        on_delete=models.CASCADE,
        related_name="watchlisted_by",
        verbose_name=_("movie"),
    )

    added_at = models.DateTimeField(_("added at"), auto_now_add=True)

    objects = WatchlistManager()

    class Meta:
        db_table = "lists_watchlist"
        verbose_name = _("Watchlist entry")
        verbose_name_plural = _("Watchlist entries")
        ordering = ["-added_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "movie"], name="unique_watchlist_per_user_movie"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "-added_at"]),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.movie_id}"
