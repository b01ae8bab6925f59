"""
Lists API endpoints.
Custom movie lists and the watchlist.
"""

from django.urls import path

from apps.lists.views import (
    MovieListCollectionView,
    MovieListDetailView,
    MyWatchlistView,
    SimilarMoviesView,
    UserListsView,
    WatchlistItemView,
)

app_name = "lists"

urlpatterns = [
    # ================================================================
    # WATCHLIST
    # ================================================================
    path("watchlist/me/", MyWatchlistView.as_view(), name="watchlist"),
    path(
        "watchlist/<int:movie_id>/",
        WatchlistItemView.as_view(),
        name="watchlist-item",
    ),
    # ================================================================
    # CUSTOM LISTS
    # ================================================================
    path("", MovieListCollectionView.as_view(), name="collection"),
    path("similar/<int:movie_id>/", SimilarMoviesView.as_view(), name="similar"),
    path("user/<int:user_id>/", UserListsView.as_view(), name="user-lists"),
    path("<int:list_id>/", MovieListDetailView.as_view(), name="detail"),
]
