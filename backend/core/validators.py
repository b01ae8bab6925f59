"""
Validators shared by models, serializers and services.
"""

import re
from typing import Tuple

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .constants import RatingScale


class PasswordStrengthValidator:
    """
    ``AUTH_PASSWORD_VALIDATORS`` entry requiring mixed case and a digit.

    Length is left to Django's ``MinimumLengthValidator``. Set
    ``require_special`` in the validator OPTIONS to also demand a symbol.
    """

    RULES = (
        (r"[A-Z]", "password_no_upper", _("Password must contain an uppercase letter.")),
        (r"[a-z]", "password_no_lower", _("Password must contain a lowercase letter.")),
        (r"\d", "password_no_digit", _("Password must contain a digit.")),
    )
    SPECIAL_RULE = (
        r"[^A-Za-z0-9]",
        "password_no_special",
        _("Password must contain a special character."),
    )

    def __init__(self, require_special: bool = False):
        self.rules = self.RULES + ((self.SPECIAL_RULE,) if require_special else ())

    def validate(self, password: str, user=None) -> None:
        errors = [
            ValidationError(message, code=code)
            for pattern, code, message in self.rules
            if not re.search(pattern, password)
        ]
        if errors:
            raise ValidationError(errors)

    def get_help_text(self) -> str:
        if len(self.rules) > len(self.RULES):
            return _(
                "Your password must mix upper and lower case letters, a digit "
                "and a special character."
            )
        return _("Your password must mix upper and lower case letters and a digit.")


def validate_username(value: str) -> None:
    """
    Validate username format.

    Raises:
        ValidationError: If username is invalid
    """
    if not re.match(r"^[a-zA-Z0-9_]{3,30}$", value or ""):
        raise ValidationError(
            _(
                "Username must be 3-30 characters long and contain only "
                "letters, numbers, and underscores."
            ),
            code="invalid_username_format",
        )


def validate_release_year(value: int) -> None:
    """Release years run from 1800 to five years past the current one."""
    max_year = timezone.now().year + 5
    if value is None or not 1800 <= value <= max_year:
        raise ValidationError(
            _(f"Release year must be between 1800 and {max_year}."),
            code="invalid_release_year",
        )


def validate_rating_score(value: int) -> None:
    """Validate a 1-10 integer score."""
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not RatingScale.MIN <= value <= RatingScale.MAX
    ):
        raise ValidationError(
            _(f"Rating must be between {RatingScale.MIN} and {RatingScale.MAX}."),
            code="invalid_rating",
        )


def validate_pagination_params(page=None, limit=None) -> Tuple[int, int]:
    """
    Normalize raw page/limit values.

    Unparseable values fall back to the defaults, the page is floored at 1
    and the limit is clamped to 1..MAX_LIMIT.
    """
    pagination = settings.PAGINATION

    try:
        page = int(page)
    except (TypeError, ValueError):
        page = pagination["DEFAULT_PAGE"]

    try:
        limit = int(limit)
    except (TypeError, ValueError):
        limit = pagination["DEFAULT_LIMIT"]

    if limit == 0:
        limit = pagination["DEFAULT_LIMIT"]

    return max(1, page), min(pagination["MAX_LIMIT"], max(1, limit))
