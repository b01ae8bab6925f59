"""
Serializer mixins.
"""

from rest_framework import serializers

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.translation import gettext_lazy as _


class TimestampMixin(serializers.Serializer):
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class PasswordValidationMixin:
    """
    Runs ``AUTH_PASSWORD_VALIDATORS`` and checks the confirmation field.
    """

    def validate_password_strength(self, password, user=None):
        try:
            password_validation.validate_password(password, user)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        return password

    def validate_password_confirmation(self, attrs):
        """Drops ``password_confirm`` from ``attrs`` once it has matched."""
        confirm = attrs.pop("password_confirm", None)
        if attrs.get("password") and confirm and attrs["password"] != confirm:
            raise serializers.ValidationError(
                {"password_confirm": _("Passwords do not match.")}
            )
        return attrs
