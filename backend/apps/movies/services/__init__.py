"""
Movies Services Module
"""

from .movie_service import MovieService
from .recommendation_service import RecommendationService
from .search_service import MovieSearchCriteria, SearchService

__all__ = [
    "MovieService",
    "RecommendationService",
    "SearchService",
    "MovieSearchCriteria",
]
