"""
Custom managers for the Movie model.
"""

from core.mixins.managers import ActiveManager


class MovieManager(ActiveManager):
    """
    Movie manager with the catalog orderings used by discovery endpoints.
    """

    def with_relations(self):
        """Prefetch genres, directors and actors for serialization."""
        return self.get_queryset().prefetch_related("genres", "directors", "actors")

    def trending(self):
        """Active movies by views, then rating."""
        return (
            self.with_relations()
            .active()
            .order_by("-views", "-average_rating", "-id")
        )

    def top_rated(self, min_ratings=10):
        """Active movies with enough ratings, best first."""
        return (
            self.with_relations()
            .active()
            .filter(total_ratings__gte=min_ratings)
            .order_by("-average_rating", "-total_ratings", "-id")
        )

    def recently_added(self):
        """Active movies, newest first."""
        return self.with_relations().active().order_by("-created_at", "-id")

    def by_genre(self, genre_ids):
        """Active movies in any of the given genres."""
        if not isinstance(genre_ids, (list, tuple, set)):
            genre_ids = [genre_ids]

        return (
            self.with_relations()
            .active()
            .filter(genres__id__in=genre_ids)
            .distinct()
        )

    def search_by_title(self, query):
        """Search active movies by title (case-insensitive)."""
        return self.active().filter(title__icontains=query)
