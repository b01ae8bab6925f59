"""
Lists app views.
"""

from .list_views import (
    MovieListCollectionView,
    MovieListDetailView,
    MyWatchlistView,
    SimilarMoviesView,
    UserListsView,
    WatchlistItemView,
)

__all__ = [
    "MovieListCollectionView",
    "MovieListDetailView",
    "UserListsView",
    "SimilarMoviesView",
    "MyWatchlistView",
    "WatchlistItemView",
]
