"""
Rating serializers.
"""

from rest_framework import serializers

from apps.movies.serializers import MovieSummarySerializer
from core.constants import RatingScale

from ..models import Rating


class RatingInputSerializer(serializers.Serializer):
    """Validates a submitted score."""

    score = serializers.IntegerField(
        min_value=RatingScale.MIN, max_value=RatingScale.MAX
    )


class RatingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Rating
        fields = ["id", "user", "movie", "score", "created_at", "updated_at"]
        read_only_fields = fields


class UserRatingSerializer(serializers.ModelSerializer):
    """A user's rating with the rated movie embedded."""

    movie = MovieSummarySerializer(read_only=True)

    class Meta:
        model = Rating
        fields = ["id", "score", "movie", "created_at", "updated_at"]
        read_only_fields = fields


class RatingStatsSerializer(serializers.Serializer):
    movie_id = serializers.IntegerField()
    average_rating = serializers.FloatField()
    total_ratings = serializers.IntegerField()
    distribution = serializers.DictField(child=serializers.IntegerField())
