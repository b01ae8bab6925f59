"""
Lists app managers.
"""

from .lists import MovieListManager, WatchlistManager

__all__ = ["MovieListManager", "WatchlistManager"]
