"""
Search Service - dynamic movie filtering, autocomplete and filter options.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.db.models import Max, Min, Q
from django.utils import timezone

from core.constants import DEFAULT_MOVIE_SORT, SortOption
from core.exceptions import DatabaseException, ValidationException
from core.pagination import paginate_queryset

from ..models import Actor, Director, Genre, Movie

logger = logging.getLogger(__name__)

NAME_SEARCH_LIMIT = 20
AUTOCOMPLETE_LIMIT = 5
FALLBACK_MIN_YEAR = 1900


def _parse_id_list(values: List[str], name: str) -> List[int]:
    """Flatten repeated and comma-separated ID params into ints."""
    ids = []
    for value in values:
        for part in str(value).split(","):
            part = part.strip()
            if not part:
                continue
            if not part.isdigit():
                raise ValidationException(
                    "Invalid ID list", field_errors={name: [f"'{part}' is not an ID"]}
                )
            ids.append(int(part))
    return ids


def _parse_number(params, name: str, cast):
    raw = params.get(name)
    if raw in (None, ""):
        return None
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise ValidationException(
            f"Invalid value for {name}",
            field_errors={name: [f"'{raw}' is not a valid number"]},
        )


@dataclass
class MovieSearchCriteria:
    """
    Optional movie filters. Unset fields do not constrain the search.
    """

    query: str = ""
    genres: List[int] = field(default_factory=list)
    actors: List[int] = field(default_factory=list)
    directors: List[int] = field(default_factory=list)
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    rating_from: Optional[float] = None
    rating_to: Optional[float] = None
    country: str = ""
    language: str = ""
    page: Any = None
    limit: Any = None
    sort: str = DEFAULT_MOVIE_SORT

    @classmethod
    def from_query_params(cls, params) -> "MovieSearchCriteria":
        """
        Build criteria from request query params.

        ID lists accept repeated params or comma-separated values.
        """
        getlist = getattr(params, "getlist", None)

        def id_values(name):
            if getlist is not None:
                return getlist(name)
            value = params.get(name)
            return value if isinstance(value, (list, tuple)) else [value or ""]

        sort = params.get("sort") or DEFAULT_MOVIE_SORT
        if sort not in SortOption.values:
            raise ValidationException(
                "Invalid sort option",
                field_errors={
                    "sort": [f"Choose one of: {', '.join(SortOption.values)}"]
                },
            )

        return cls(
            query=(params.get("q") or params.get("query") or "").strip(),
            genres=_parse_id_list(id_values("genres"), "genres"),
            actors=_parse_id_list(id_values("actors"), "actors"),
            directors=_parse_id_list(id_values("directors"), "directors"),
            year_from=_parse_number(params, "year_from", int),
            year_to=_parse_number(params, "year_to", int),
            rating_from=_parse_number(params, "rating_from", float),
            rating_to=_parse_number(params, "rating_to", float),
            country=(params.get("country") or "").strip(),
            language=(params.get("language") or "").strip(),
            page=params.get("page"),
            limit=params.get("limit"),
            sort=sort,
        )

    def to_filter(self) -> Q:
        """Translate the set criteria into a predicate over active movies."""
        predicate = Q(is_active=True)

        if self.query:
            predicate &= Q(title__icontains=self.query) | Q(
                description__icontains=self.query
            )
        if self.genres:
            predicate &= Q(genres__id__in=self.genres)
        if self.actors:
            predicate &= Q(actors__id__in=self.actors)
        if self.directors:
            predicate &= Q(directors__id__in=self.directors)
        if self.year_from is not None:
            predicate &= Q(release_year__gte=self.year_from)
        if self.year_to is not None:
            predicate &= Q(release_year__lte=self.year_to)
        if self.rating_from is not None:
            predicate &= Q(average_rating__gte=self.rating_from)
        if self.rating_to is not None:
            predicate &= Q(average_rating__lte=self.rating_to)
        if self.country:
            predicate &= Q(country__icontains=self.country)
        if self.language:
            predicate &= Q(language__icontains=self.language)

        return predicate


class SearchService:
    """
    Service class for movie search operations.
    """

    def advanced_search(self, criteria: MovieSearchCriteria) -> Dict[str, Any]:
        """
        Filter, sort and paginate the catalog.

        Returns:
            Dict with ``movies`` and ``pagination``
        """
        logger.info(f"Advanced search: {criteria}")

        try:
            queryset = (
                Movie.objects.with_relations()
                .filter(criteria.to_filter())
                .distinct()
                .order_by(criteria.sort, "-id")
            )
            movies, pagination = paginate_queryset(
                queryset, criteria.page, criteria.limit
            )
            return {"movies": movies, "pagination": pagination}

        except Exception as e:
            logger.error(f"Advanced search failed: {e}")
            raise DatabaseException(f"Search error: {e}")

    def search_by_actor(self, name: str) -> List[Movie]:
        """Active movies featuring any actor whose name matches."""
        try:
            actor_ids = list(Actor.objects.by_name(name).values_list("id", flat=True))
            if not actor_ids:
                return []

            return list(
                Movie.objects.with_relations()
                .active()
                .filter(actors__id__in=actor_ids)
                .distinct()
                .order_by("-average_rating", "-id")[:NAME_SEARCH_LIMIT]
            )

        except Exception as e:
            logger.error(f"Actor search failed for '{name}': {e}")
            raise DatabaseException(f"Actor search error: {e}")

    def search_by_director(self, name: str) -> List[Movie]:
        """Active movies by any director whose name matches."""
        try:
            director_ids = list(
                Director.objects.by_name(name).values_list("id", flat=True)
            )
            if not director_ids:
                return []

            return list(
                Movie.objects.with_relations()
                .active()
                .filter(directors__id__in=director_ids)
                .distinct()
                .order_by("-average_rating", "-id")[:NAME_SEARCH_LIMIT]
            )

        except Exception as e:
            logger.error(f"Director search failed for '{name}': {e}")
            raise DatabaseException(f"Director search error: {e}")

    def get_autocomplete_suggestions(self, query: str) -> Dict[str, List[Dict]]:
        """
        Name suggestions across movies, actors, directors and genres.

        Each group is capped at five entries.
        """
        try:
            movies = Movie.objects.search_by_title(query).values(
                "id", "title", "poster_url", "release_year"
            )[:AUTOCOMPLETE_LIMIT]
            actors = Actor.objects.by_name(query).values("id", "name", "photo_url")[
                :AUTOCOMPLETE_LIMIT
            ]
            directors = Director.objects.by_name(query).values(
                "id", "name", "photo_url"
            )[:AUTOCOMPLETE_LIMIT]
            genres = Genre.objects.by_name(query).values("id", "name", "slug")[
                :AUTOCOMPLETE_LIMIT
            ]

            return {
                "movies": list(movies),
                "actors": list(actors),
                "directors": list(directors),
                "genres": list(genres),
            }

        except Exception as e:
            logger.error(f"Autocomplete failed for '{query}': {e}")
            raise DatabaseException(f"Autocomplete error: {e}")

    def get_filter_options(self) -> Dict[str, Any]:
        """
        Values available to the search filters.

        The year range falls back to 1900 through the current year when the
        catalog has no active movies.
        """
        try:
            active = Movie.objects.active()
            years = active.aggregate(
                min_year=Min("release_year"), max_year=Max("release_year")
            )

            countries = sorted(
                set(active.exclude(country="").values_list("country", flat=True))
            )
            languages = sorted(
                set(active.exclude(language="").values_list("language", flat=True))
            )

            return {
                "genres": list(
                    Genre.objects.order_by("name").values("id", "name", "slug")
                ),
                "years": {
                    "min": years["min_year"] or FALLBACK_MIN_YEAR,
                    "max": years["max_year"] or timezone.now().year,
                },
                "countries": countries,
                "languages": languages,
            }

        except Exception as e:
            logger.error(f"Failed to load filter options: {e}")
            raise DatabaseException(f"Filter options error: {e}")
