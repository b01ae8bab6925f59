"""
Genre serializers.
"""

from rest_framework import serializers

from ..models import Genre


class GenreSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Genre
        fields = ["id", "name", "slug"]
        read_only_fields = fields
