"""
Watchlist and movie list serializers.
"""

from rest_framework import serializers

from apps.authentication.serializers import UserSummarySerializer
from apps.movies.serializers import MovieListSerializer, MovieSummarySerializer
from core.mixins.serializers import TimestampMixin

from ..models import MovieList, Watchlist


class WatchlistEntrySerializer(serializers.ModelSerializer):
    movie = MovieListSerializer(read_only=True)

    class Meta:
        model = Watchlist
        fields = ["id", "movie", "added_at"]
        read_only_fields = fields


class UserMovieListSerializer(TimestampMixin, serializers.ModelSerializer):
    """
    A user's movie list with its owner and movies.
    """

    user = UserSummarySerializer(read_only=True)
    movies = MovieSummarySerializer(many=True, read_only=True)
    movie_count = serializers.SerializerMethodField()

    class Meta:
        model = MovieList
        fields = [
            "id",
            "user",
            "name",
            "description",
            "is_public",
            "movies",
            "movie_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_movie_count(self, obj) -> int:
        return len(obj.movies.all())


class MovieListWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(
        max_length=500, required=False, allow_blank=True
    )
    is_public = serializers.BooleanField(required=False)
    movie_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False
    )

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("List name cannot be blank")
        return value
