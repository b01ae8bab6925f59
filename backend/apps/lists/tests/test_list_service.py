"""
Tests for the watchlist and custom movie lists.
"""

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from apps.lists.models import MovieList, Watchlist
from apps.lists.services import ListService
from core.exceptions import (
    ConflictException,
    ListNotFoundException,
    MovieNotFoundException,
    NotFoundException,
    PermissionException,
    ValidationException,
)
from core.testing import create_movie, create_user


class TestWatchlist(TestCase):
    def setUp(self):
        self.service = ListService()
        self.user = create_user()

    def test_add_and_list_newest_first(self):
        first, second = create_movie(), create_movie()
        self.service.add_to_watchlist(self.user, first.id)
        self.service.add_to_watchlist(self.user, second.id)

        result = self.service.get_watchlist(self.user.id)

        self.assertEqual([e.movie_id for e in result["watchlist"]], [second.id, first.id])
        self.assertEqual(result["pagination"]["total"], 2)

    def test_duplicate_entry_conflicts(self):
        movie = create_movie()
        self.service.add_to_watchlist(self.user, movie.id)

        with self.assertRaises(ConflictException):
            self.service.add_to_watchlist(self.user, movie.id)

        self.assertEqual(Watchlist.objects.filter(user=self.user).count(), 1)

    def test_inactive_movie_cannot_be_added(self):
        with self.assertRaises(MovieNotFoundException):
            self.service.add_to_watchlist(self.user, create_movie(is_active=False).id)

    def test_remove_missing_entry(self):
        with self.assertRaises(NotFoundException):
            self.service.remove_from_watchlist(self.user, create_movie().id)

    def test_remove(self):
        movie = create_movie()
        self.service.add_to_watchlist(self.user, movie.id)

        self.service.remove_from_watchlist(self.user, movie.id)

        self.assertFalse(Watchlist.objects.filter(user=self.user).exists())


class TestMovieLists(TestCase):
    def setUp(self):
        self.service = ListService()
        self.owner = create_user()
        self.movies = [create_movie(), create_movie()]

    def test_create_with_movies(self):
        movie_list = self.service.create_list(
            self.owner, "Rainy day", movie_ids=[m.id for m in self.movies]
        )

        self.assertTrue(movie_list.is_public)
        self.assertEqual(movie_list.movies.count(), 2)

    def test_unknown_movie_ids_are_rejected(self):
        with self.assertRaises(ValidationException) as ctx:
            self.service.create_list(self.owner, "Broken", movie_ids=[999999])

        self.assertIn("movie_ids", ctx.exception.field_errors)
        self.assertFalse(MovieList.objects.exists())

    def test_private_list_is_hidden_from_others(self):
        movie_list = self.service.create_list(self.owner, "Secret", is_public=False)

        self.assertEqual(self.service.get_list(movie_list.id, self.owner), movie_list)
        with self.assertRaises(ListNotFoundException):
            self.service.get_list(movie_list.id, create_user())
        with self.assertRaises(ListNotFoundException):
            self.service.get_list(movie_list.id, AnonymousUser())

    def test_only_owner_can_modify(self):
        movie_list = self.service.create_list(self.owner, "Mine")
        stranger = create_user()

        with self.assertRaises(PermissionException):
            self.service.update_list(stranger, movie_list.id, name="Theirs")
        with self.assertRaises(PermissionException):
            self.service.delete_list(stranger, movie_list.id)

    def test_update_replaces_movies(self):
        movie_list = self.service.create_list(
            self.owner, "Mine", movie_ids=[self.movies[0].id]
        )

        updated = self.service.update_list(
            self.owner,
            movie_list.id,
            name="Renamed",
            is_public=False,
            movie_ids=[self.movies[1].id],
        )

        self.assertEqual(updated.name, "Renamed")
        self.assertFalse(updated.is_public)
        self.assertEqual(list(updated.movies.all()), [self.movies[1]])

    def test_user_lists_respect_viewer(self):
        self.service.create_list(self.owner, "Open")
        self.service.create_list(self.owner, "Closed", is_public=False)

        own = self.service.get_user_lists(self.owner.id, viewer=self.owner)
        other = self.service.get_user_lists(self.owner.id, viewer=create_user())

        self.assertEqual(own["pagination"]["total"], 2)
        self.assertEqual([movie_list.name for movie_list in other["lists"]], ["Open"])
