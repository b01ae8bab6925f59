"""
Cast and crew models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.mixins.models import TimeStampedMixin

from ..managers import PersonManager


class Person(TimeStampedMixin):
    """Shared fields for people credited on a movie."""

    name = models.CharField(_("name"), max_length=100, db_index=True)

    birth_date = models.DateField(_("birth date"), null=True, blank=True)

    nationality = models.CharField(
        _("nationality"), max_length=100, blank=True, default=""
    )

    bio = models.TextField(_("bio"), max_length=2000, blank=True, default="")

    photo_url = models.URLField(_("photo URL"), max_length=500, blank=True, default="")

    objects = PersonManager()

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return self.name


class Actor(Person):
    class Meta(Person.Meta):
        db_table = "movies_actor"
        verbose_name = _("Actor")
        verbose_name_plural = _("Actors")


class Director(Person):
    class Meta(Person.Meta):
        db_table = "movies_director"
        verbose_name = _("Director")
        verbose_name_plural = _("Directors")
