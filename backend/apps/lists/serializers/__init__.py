"""
Lists app serializers.
"""

from .lists import (
    MovieListWriteSerializer,
    UserMovieListSerializer,
    WatchlistEntrySerializer,
)

__all__ = [
    "WatchlistEntrySerializer",
    "UserMovieListSerializer",
    "MovieListWriteSerializer",
]
