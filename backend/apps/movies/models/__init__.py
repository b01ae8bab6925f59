from .genre import Genre
from .movie import Movie
from .person import Actor, Director

__all__ = ["Genre", "Movie", "Actor", "Director"]
