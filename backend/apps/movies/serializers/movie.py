"""
Movie serializers.
"""

from rest_framework import serializers

from core.mixins.serializers import TimestampMixin

from ..models import Movie
from .genre import GenreSummarySerializer
from .person import PersonSummarySerializer

DERIVED_FIELDS = ["average_rating", "total_ratings", "total_reviews", "views"]


class MovieSummarySerializer(serializers.ModelSerializer):
    """
    Minimal movie payload embedded in ratings, reviews and lists.
    """

    class Meta:
        model = Movie
        fields = [
            "id",
            "title",
            "release_year",
            "poster_url",
            "average_rating",
            "total_ratings",
        ]
        read_only_fields = fields


class MovieListSerializer(TimestampMixin, serializers.ModelSerializer):
    """
    Movie serializer for catalog listings, search and recommendations.
    """

    genres = GenreSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Movie
        fields = [
            "id",
            "title",
            "description",
            "release_year",
            "duration",
            "poster_url",
            "country",
            "language",
            "genres",
            *DERIVED_FIELDS,
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MovieDetailSerializer(MovieListSerializer):
    """
    Full movie payload with cast and crew.
    """

    directors = PersonSummarySerializer(many=True, read_only=True)
    actors = PersonSummarySerializer(many=True, read_only=True)

    class Meta(MovieListSerializer.Meta):
        fields = MovieListSerializer.Meta.fields + [
            "trailer_url",
            "directors",
            "actors",
            "is_active",
        ]
        read_only_fields = fields


class MovieWriteSerializer(serializers.ModelSerializer):
    """
    Admin create/update payload. Relations are given as lists of IDs.
    """

    class Meta:
        model = Movie
        fields = [
            "title",
            "description",
            "release_year",
            "duration",
            "poster_url",
            "trailer_url",
            "country",
            "language",
            "genres",
            "directors",
            "actors",
            "is_active",
        ]

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title cannot be blank")
        return value
