"""
Movies API endpoints.
Catalog, search, discovery, recommendations, ratings and movie reviews.
"""

from django.urls import path

from apps.movies.views import (
    AutocompleteView,
    BecauseYouWatchedView,
    FilterOptionsView,
    GenreMoviesView,
    HomepageView,
    MovieDetailView,
    MovieFilterView,
    MovieListView,
    MoviesByActorView,
    MoviesByDirectorView,
    MovieSearchView,
    PersonalizedRecommendationsView,
    SimilarMoviesView,
    TopRatedMoviesView,
    TrendingMoviesView,
)
from apps.ratings.views import MovieRatingStatsView, MovieRatingView, MyRatingsView
from apps.reviews.views import MovieReviewsView

app_name = "movies"

urlpatterns = [
    # ================================================================
    # CATALOG
    # ================================================================
    path("", MovieListView.as_view(), name="list"),
    # ================================================================
    # SEARCH
    # ================================================================
    path("search/", MovieSearchView.as_view(), name="search"),
    path("filter/", MovieFilterView.as_view(), name="filter"),
    path("autocomplete/", AutocompleteView.as_view(), name="autocomplete"),
    path("filter-options/", FilterOptionsView.as_view(), name="filter-options"),
    path("by-actor/", MoviesByActorView.as_view(), name="by-actor"),
    path("by-director/", MoviesByDirectorView.as_view(), name="by-director"),
    # ================================================================
    # DISCOVERY & RECOMMENDATIONS
    # ================================================================
    path("trending/", TrendingMoviesView.as_view(), name="trending"),
    path("top-rated/", TopRatedMoviesView.as_view(), name="top-rated"),
    path("home/", HomepageView.as_view(), name="home"),
    path(
        "recommendations/",
        PersonalizedRecommendationsView.as_view(),
        name="recommendations",
    ),
    path("genres/<int:genre_id>/", GenreMoviesView.as_view(), name="by-genre"),
    # ================================================================
    # RATINGS
    # ================================================================
    path("ratings/me/", MyRatingsView.as_view(), name="my-ratings"),
    # ================================================================
    # SINGLE MOVIE
    # ================================================================
    path("<int:movie_id>/", MovieDetailView.as_view(), name="detail"),
    path("<int:movie_id>/similar/", SimilarMoviesView.as_view(), name="similar"),
    path(
        "<int:movie_id>/because-you-watched/",
        BecauseYouWatchedView.as_view(),
        name="because-you-watched",
    ),
    path("<int:movie_id>/rating/", MovieRatingView.as_view(), name="rating"),
    path(
        "<int:movie_id>/ratings/stats/",
        MovieRatingStatsView.as_view(),
        name="rating-stats",
    ),
    path("<int:movie_id>/reviews/", MovieReviewsView.as_view(), name="reviews"),
]
