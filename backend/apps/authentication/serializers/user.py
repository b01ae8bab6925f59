"""
User authentication serializers.
"""

from rest_framework import serializers

from django.contrib.auth import get_user_model
from django.utils.translation import gettext_lazy as _

from core.mixins.serializers import PasswordValidationMixin, TimestampMixin
from core.validators import validate_username

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Public author payload embedded in reviews and lists.
    """

    avatar_url = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = ["id", "username", "avatar_url"]
        read_only_fields = fields


class UserSerializer(TimestampMixin, serializers.ModelSerializer):
    """
    User serializer for the profile endpoints.
    """

    avatar_url = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "bio",
            "avatar",
            "avatar_url",
            "is_active",
            "date_joined",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserRegistrationSerializer(PasswordValidationMixin, serializers.Serializer):
    """
    User registration serializer.

    Uniqueness of email and username is enforced by the service, which
    answers duplicates with a conflict.
    """

    username = serializers.CharField(max_length=30, validators=[validate_username])
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    password_confirm = serializers.CharField(write_only=True)

    def validate_email(self, value):
        return value.lower().strip()

    def validate_password(self, value):
        return self.validate_password_strength(value)

    def validate(self, attrs):
        return self.validate_password_confirmation(attrs)


class UserLoginSerializer(serializers.Serializer):
    """
    User login serializer. Credentials are checked by the service.
    """

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate_email(self, value):
        return value.lower().strip()


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text=_("Refresh token to revoke"))


class UserProfileUpdateSerializer(serializers.ModelSerializer):
    """
    Partial profile update. Duplicate usernames are rejected as validation
    errors here since the user is editing their own account.
    """

    username = serializers.CharField(
        max_length=30, required=False, validators=[validate_username]
    )

    class Meta:
        model = User
        fields = ["username", "bio", "avatar"]

    def validate_username(self, value):
        queryset = User.objects.filter(username__iexact=value)
        if self.instance:
            queryset = queryset.exclude(pk=self.instance.pk)

        if queryset.exists():
            raise serializers.ValidationError(_("Username already taken"))

        return value
