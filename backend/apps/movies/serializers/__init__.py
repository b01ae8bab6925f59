"""
Movies app serializers.
"""

from .genre import GenreSummarySerializer
from .movie import (
    MovieDetailSerializer,
    MovieListSerializer,
    MovieSummarySerializer,
    MovieWriteSerializer,
)
from .person import PersonSummarySerializer

__all__ = [
    "GenreSummarySerializer",
    "PersonSummarySerializer",
    "MovieSummarySerializer",
    "MovieListSerializer",
    "MovieDetailSerializer",
    "MovieWriteSerializer",
]
