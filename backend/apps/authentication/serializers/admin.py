"""
Admin user management serializers.
"""

from rest_framework import serializers

from django.contrib.auth import get_user_model

from core.constants import UserRole

from .user import UserSerializer

User = get_user_model()


class AdminUserListSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "is_active",
            "date_joined",
            "last_login",
        ]
        read_only_fields = fields


class AdminUserDetailSerializer(UserSerializer):
    """
    User detail for admins, with activity counts annotated by the service.
    """

    review_count = serializers.IntegerField(read_only=True)
    rating_count = serializers.IntegerField(read_only=True)
    list_count = serializers.IntegerField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + [
            "last_login",
            "review_count",
            "rating_count",
            "list_count",
        ]
        read_only_fields = fields


class AdminRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=UserRole.choices)


class AdminStatusSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()
