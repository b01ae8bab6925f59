"""
Rating model - a user's 1-10 score for a movie.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.constants import RatingScale
from core.mixins.models import TimeStampedMixin

from ..managers import RatingManager


class Rating(TimeStampedMixin):
    """
    Numeric score a user assigns to a movie. At most one per (user, movie).
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="ratings",
        verbose_name=_("user"),
    )

    movie = models.ForeignKey(
        "movies.Movie",
        on_delete=models.CASCADE,
        related_name="ratings",
        verbose_name=_("movie"),
    )

    score = models.PositiveSmallIntegerField(
        _("score"),
        validators=[
            MinValueValidator(RatingScale.MIN),
            MaxValueValidator(RatingScale.MAX),
        ],
    )

    objects = RatingManager()

    class Meta:
        db_table = "ratings_rating"
        verbose_name = _("Rating")
        verbose_name_plural = _("Ratings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "movie"], name="unique_rating_per_user_movie"
            ),
        ]
        indexes = [
            models.Index(fields=["movie", "score"]),
            models.Index(fields=["user", "-created_at"]),
        ]

    def __str__(self):
        return f"{self.user_id} rated {self.movie_id}: {self.score}"
