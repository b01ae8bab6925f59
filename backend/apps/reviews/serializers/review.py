"""
Review serializers.
"""

from rest_framework import serializers

from apps.authentication.serializers import UserSummarySerializer
from apps.movies.serializers import MovieSummarySerializer
from core.constants import RatingScale, VoteType
from core.mixins.serializers import TimestampMixin

from ..models import Review


class ReviewSerializer(TimestampMixin, serializers.ModelSerializer):
    """
    Review as shown under a movie.
    """

    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "user",
            "movie",
            "rating",
            "content",
            "helpful_votes",
            "unhelpful_votes",
            "is_edited",
            "edited_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminReviewSerializer(ReviewSerializer):
    """Moderation payload with the movie embedded and the hidden flag."""

    movie = MovieSummarySerializer(read_only=True)

    class Meta(ReviewSerializer.Meta):
        fields = ReviewSerializer.Meta.fields + ["is_hidden"]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    movie_id = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(
        min_value=RatingScale.MIN, max_value=RatingScale.MAX
    )
    content = serializers.CharField(min_length=10, max_length=5000)

    def validate_content(self, value):
        value = value.strip()
        if len(value) < 10:
            raise serializers.ValidationError(
                "Review must be at least 10 characters long"
            )
        return value


class ReviewUpdateSerializer(ReviewCreateSerializer):
    """Partial edit: rating and/or content."""

    movie_id = None
    rating = serializers.IntegerField(
        min_value=RatingScale.MIN, max_value=RatingScale.MAX, required=False
    )
    content = serializers.CharField(min_length=10, max_length=5000, required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide a rating or content to update")
        return attrs


class ReviewVoteSerializer(serializers.Serializer):
    vote_type = serializers.ChoiceField(choices=VoteType.choices)


class ReviewVisibilitySerializer(serializers.Serializer):
    is_hidden = serializers.BooleanField()
