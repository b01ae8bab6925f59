from .movie_list import MovieList
from .watchlist import Watchlist

__all__ = ["MovieList", "Watchlist"]
