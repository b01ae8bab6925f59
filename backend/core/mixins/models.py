"""
Abstract model mixins shared by the FilmRate apps.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import ActiveManager


class TimeStampedMixin(models.Model):
    """
    Adds ``created_at`` and ``updated_at``, maintained by Django.
    """

    created_at = models.DateTimeField(
        _("created at"),
        auto_now_add=True,
        db_index=True,
    )
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:
        abstract = True


class ActiveMixin(models.Model):
    """
    Soft on/off switch. Inactive rows stay in the database but are hidden
    from public listings.
    """

    is_active = models.BooleanField(
        _("is active"),
        default=True,
        db_index=True,
        help_text=_("Inactive records are hidden from public listings"),
    )

    objects = ActiveManager()

    class Meta:
        abstract = True

    def activate(self):
        self.is_active = True
        self.save(update_fields=["is_active", "updated_at"])

    def deactivate(self):
        self.is_active = False
        self.save(update_fields=["is_active", "updated_at"])


class BaseModelMixin(TimeStampedMixin, ActiveMixin):
    """Timestamps plus the active flag."""

    class Meta:
        abstract = True
        ordering = ["-created_at"]
