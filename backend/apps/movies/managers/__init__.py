"""
Movies app managers.
"""

from .genre import GenreManager
from .movie import MovieManager
from .person import PersonManager

__all__ = ["GenreManager", "MovieManager", "PersonManager"]
