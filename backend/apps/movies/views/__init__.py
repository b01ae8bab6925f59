"""
Movies app views.
"""

from .discovery_views import (
    GenreMoviesView,
    HomepageView,
    TopRatedMoviesView,
    TrendingMoviesView,
)
from .movie_views import (
    AdminMovieCreateView,
    AdminMovieDetailView,
    MovieDetailView,
    MovieListView,
)
from .recommendation_views import (
    BecauseYouWatchedView,
    PersonalizedRecommendationsView,
    SimilarMoviesView,
)
from .search_views import (
    AutocompleteView,
    FilterOptionsView,
    MovieFilterView,
    MoviesByActorView,
    MoviesByDirectorView,
    MovieSearchView,
)

__all__ = [
    # Catalog
    "MovieListView",
    "MovieDetailView",
    # Discovery
    "TrendingMoviesView",
    "TopRatedMoviesView",
    "GenreMoviesView",
    "HomepageView",
    # Recommendations
    "PersonalizedRecommendationsView",
    "SimilarMoviesView",
    "BecauseYouWatchedView",
    # Search
    "MovieSearchView",
    "MovieFilterView",
    "AutocompleteView",
    "FilterOptionsView",
    "MoviesByActorView",
    "MoviesByDirectorView",
    # Admin
    "AdminMovieCreateView",
    "AdminMovieDetailView",
]
