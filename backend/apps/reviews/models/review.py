"""
Review and ReviewVote models.
"""

from django.conf import settings
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.constants import RatingScale, VoteType
from core.mixins.models import TimeStampedMixin

from ..managers import ReviewManager


class Review(TimeStampedMixin):
    """
    Written critique of a movie with an embedded 1-10 rating.
    At most one per (user, movie).
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
        verbose_name=_("user"),
    )

    movie = models.ForeignKey(
        "movies.Movie",
        on_delete=models.CASCADE,
        related_name="reviews",
        verbose_name=_("movie"),
    )

    rating = models.PositiveSmallIntegerField(
        _("rating"),
        validators=[
            MinValueValidator(RatingScale.MIN),
            MaxValueValidator(RatingScale.MAX),
        ],
    )

    content = models.TextField(
        _("content"),
        max_length=5000,
        validators=[MinLengthValidator(10)],
    )

    helpful_votes = models.PositiveIntegerField(_("helpful votes"), default=0)

    unhelpful_votes = models.PositiveIntegerField(_("unhelpful votes"), default=0)

    is_hidden = models.BooleanField(
        _("is hidden"),
        default=False,
        db_index=True,
        help_text=_("Hidden by a moderator"),
    )

    is_edited = models.BooleanField(_("is edited"), default=False)

    edited_at = models.DateTimeField(_("edited at"), null=True, blank=True)

    objects = ReviewManager()

    class Meta:
        db_table = "reviews_review"
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "movie"], name="unique_review_per_user_movie"
            ),
        ]
        indexes = [
            models.Index(fields=["movie", "is_hidden", "-created_at"]),
            models.Index(fields=["user", "-created_at"]),
        ]

    def __str__(self):
        return f"Review {self.id} by {self.user_id} on {self.movie_id}"

    def mark_edited(self):
        self.is_edited = True
        self.edited_at = timezone.now()


class ReviewVote(TimeStampedMixin):
    """A helpful/unhelpful vote on a review. At most one per (user, review)."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="review_votes",
        verbose_name=_("user"),
    )

    review = models.ForeignKey(
        Review,
        on_delete=models.CASCADE,
        related_name="votes",
        verbose_name=_("review"),
    )

    vote_type = models.CharField(
        _("vote type"), max_length=10, choices=VoteType.choices
    )

    class Meta:
        db_table = "reviews_review_vote"
        verbose_name = _("Review vote")
        verbose_name_plural = _("Review votes")
        constraints = [
            models.UniqueConstraint(
                fields=["user", "review"], name="unique_vote_per_user_review"
            ),
        ]

    def __str__(self):
        return f"{self.user_id} voted {self.vote_type} on review {self.review_id}"
