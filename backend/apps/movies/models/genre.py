"""
Genre model - Movie genre classification.
"""

from django.db import models
from django.utils.text import slugify
from django.utils.translation import gettext_lazy as _

from core.mixins.models import TimeStampedMixin

from ..managers import GenreManager


class Genre(TimeStampedMixin):
    """
    Movie genre with a URL-friendly slug generated from its name.
    """

    name = models.CharField(
        _("name"), max_length=50, unique=True, db_index=True, help_text=_("Genre name")
    )

    slug = models.SlugField(
        _("slug"), max_length=60, unique=True, help_text=_("URL-friendly genre name")
    )

    description = models.TextField(
        _("description"), max_length=500, blank=True, default=""
    )

    objects = GenreManager()

    class Meta:
        db_table = "movies_genre"
        verbose_name = _("Genre")
        verbose_name_plural = _("Genres")
        ordering = ["name"]

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<Genre: {self.name}>"

    def save(self, *args, **kwargs):
        """Override save to auto-generate slug."""
        if not self.slug and self.name:
            self.slug = slugify(self.name)

        super().save(*args, **kwargs)
