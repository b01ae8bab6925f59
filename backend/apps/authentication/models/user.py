"""
User model for FilmRate authentication.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.constants import UserRole
from core.mixins import TimeStampedMixin
from core.validators import validate_username

from ..managers import UserManager


class User(AbstractUser, TimeStampedMixin):
    """
    Custom user model using email as the login identifier.
    """

    username = models.CharField(
        _("username"),
        max_length=30,
        unique=True,
        validators=[validate_username],
        help_text=_("Required. 3-30 letters, digits or underscores."),
        error_messages={"unique": _("Username already taken")},
    )

    # Primary authentication credential
    email = models.EmailField(
        _("email address"),
        max_length=254,
        unique=True,
        db_index=True,
        help_text=_("Required. User email address for authentication."),
        error_messages={"unique": _("Email already registered")},
    )

    role = models.CharField(
        _("role"),
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.USER,
        db_index=True,
        help_text=_("User role for access control."),
    )

    bio = models.TextField(
        _("bio"),
        max_length=500,
        blank=True,
        default="",
        help_text=_("Short self description shown on the profile."),
    )

    avatar = models.URLField(
        _("avatar"),
        max_length=500,
        blank=True,
        null=True,
        help_text=_("Profile picture URL."),
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    objects = UserManager()

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["role"]),
            models.Index(fields=["is_active", "role"]),
        ]

    def __str__(self):
        return self.username

    def save(self, *args, **kwargs):
        # Admin role grants staff access
        if self.role == UserRole.ADMIN:
            self.is_staff = True
        super().save(*args, **kwargs)

    @property
    def avatar_url(self):
        """Return avatar URL with fallback to generated avatar."""
        if self.avatar:
            return self.avatar
        return (
            f"https://ui-avatars.com/api/?name={self.username[:2].upper()}"
            f"&background=6366f1&color=fff&size=200"
        )
