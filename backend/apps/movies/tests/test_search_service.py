"""
Tests for movie search, autocomplete and filter options.
"""

from django.http import QueryDict
from django.test import TestCase
from django.utils import timezone

from apps.movies.models import Actor, Director, Movie
from apps.movies.services import MovieSearchCriteria, SearchService
from core.constants import DEFAULT_MOVIE_SORT, SortOption
from core.exceptions import ValidationException
from core.testing import create_genre, create_movie, create_person


class TestMovieSearchCriteria(TestCase):
    def test_defaults_from_empty_params(self):
        criteria = MovieSearchCriteria.from_query_params(QueryDict(""))

        self.assertEqual(criteria.query, "")
        self.assertEqual(criteria.genres, [])
        self.assertIsNone(criteria.year_from)
        self.assertEqual(criteria.sort, DEFAULT_MOVIE_SORT)

    def test_id_lists_accept_repeats_and_commas(self):
        criteria = MovieSearchCriteria.from_query_params(
            QueryDict("genres=1,2&genres=3&actors=7")
        )

        self.assertEqual(criteria.genres, [1, 2, 3])
        self.assertEqual(criteria.actors, [7])

    def test_plain_dict_params(self):
        criteria = MovieSearchCriteria.from_query_params(
            {"query": " alien ", "year_from": "1979", "rating_from": "7.5"}
        )

        self.assertEqual(criteria.query, "alien")
        self.assertEqual(criteria.year_from, 1979)
        self.assertEqual(criteria.rating_from, 7.5)

    def test_bad_values_raise_field_errors(self):
        with self.assertRaises(ValidationException) as ctx:
            MovieSearchCriteria.from_query_params(QueryDict("genres=1,x"))
        self.assertIn("genres", ctx.exception.field_errors)

        with self.assertRaises(ValidationException) as ctx:
            MovieSearchCriteria.from_query_params(QueryDict("year_to=soon"))
        self.assertIn("year_to", ctx.exception.field_errors)

        with self.assertRaises(ValidationException) as ctx:
            MovieSearchCriteria.from_query_params(QueryDict("sort=popularity"))
        self.assertIn("sort", ctx.exception.field_errors)


class TestAdvancedSearch(TestCase):
    def setUp(self):
        self.service = SearchService()
        self.thriller = create_genre("Thriller")
        self.romance = create_genre("Romance")

        self.heat = create_movie(
            "Heat",
            genres=[self.thriller],
            release_year=1995,
            country="USA",
            language="English",
        )
        self.amelie = create_movie(
            "Amelie",
            genres=[self.romance],
            release_year=2001,
            country="France",
            language="French",
        )
        self.drive = create_movie(
            "Drive",
            description="A stunt driver moonlights as a getaway driver.",
            genres=[self.thriller, self.romance],
            release_year=2011,
            country="USA",
            language="English",
        )
        Movie.objects.filter(pk=self.heat.pk).update(average_rating=8.3)
        Movie.objects.filter(pk=self.amelie.pk).update(average_rating=8.0)
        Movie.objects.filter(pk=self.drive.pk).update(average_rating=7.8)

    def search(self, **fields):
        return self.service.advanced_search(MovieSearchCriteria(**fields))

    def test_no_filters_returns_all_active(self):
        create_movie(is_active=False)

        result = self.search()

        self.assertEqual(result["pagination"]["total"], 3)

    def test_query_matches_title_or_description(self):
        self.assertEqual(self.search(query="heat")["movies"], [self.heat])
        self.assertEqual(self.search(query="getaway")["movies"], [self.drive])

    def test_multi_genre_match_is_not_duplicated(self):
        result = self.search(genres=[self.thriller.id, self.romance.id])

        self.assertEqual(result["pagination"]["total"], 3)
        self.assertEqual(len(result["movies"]), 3)

    def test_year_and_rating_ranges(self):
        result = self.search(year_from=2000, rating_from=7.9)

        self.assertEqual(result["movies"], [self.amelie])

    def test_country_and_language(self):
        result = self.search(country="usa", language="english", sort=SortOption.TITLE_ASC)

        self.assertEqual(result["movies"], [self.drive, self.heat])

    def test_pagination(self):
        result = self.search(page=2, limit=2, sort=SortOption.HIGHEST_RATED)

        self.assertEqual(result["movies"], [self.drive])
        self.assertEqual(result["pagination"], {"page": 2, "limit": 2, "total": 3, "pages": 2})


class TestPeopleSearch(TestCase):
    def test_by_actor_and_director(self):
        service = SearchService()
        actor = create_person(Actor, "Ryan Gosling")
        director = create_person(Director, "Denis Villeneuve")
        blade_runner = create_movie("Blade Runner 2049", actors=[actor], directors=[director])
        create_movie("Sicario", directors=[director])

        self.assertEqual(service.search_by_actor("gosling"), [blade_runner])
        self.assertEqual(len(service.search_by_director("villeneuve")), 2)
        self.assertEqual(service.search_by_actor("nobody"), [])


class TestAutocomplete(TestCase):
    def test_groups_are_capped(self):
        service = SearchService()
        for n in range(7):
            create_movie(f"Star Saga {n}")
        create_person(Actor, "Starla Lane")
        create_genre("Starlight")

        suggestions = service.get_autocomplete_suggestions("star")

        self.assertEqual(len(suggestions["movies"]), 5)
        self.assertEqual(suggestions["actors"][0]["name"], "Starla Lane")
        self.assertEqual(suggestions["genres"][0]["slug"], "starlight")
        self.assertEqual(suggestions["directors"], [])


class TestFilterOptions(TestCase):
    def test_empty_catalog_falls_back(self):
        options = SearchService().get_filter_options()

        self.assertEqual(options["years"], {"min": 1900, "max": timezone.now().year})
        self.assertEqual(options["countries"], [])

    def test_values_from_active_movies(self):
        create_genre("Drama")
        create_movie(release_year=1990, country="Japan", language="Japanese")
        create_movie(release_year=2010, country="Italy", language="Italian")
        create_movie(release_year=1950, country="Chile", is_active=False)

        options = SearchService().get_filter_options()

        self.assertEqual(options["years"], {"min": 1990, "max": 2010})
        self.assertEqual(options["countries"], ["Italy", "Japan"])
        self.assertEqual(options["languages"], ["Italian", "Japanese"])
        self.assertEqual([g["name"] for g in options["genres"]], ["Drama"])
