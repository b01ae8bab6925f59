"""
Tests for rating aggregation and rating CRUD.
"""

from django.test import TestCase

from apps.ratings.models import Rating
from apps.ratings.services import RatingService
from core.exceptions import (
    ConflictException,
    MovieNotFoundException,
    NotFoundException,
    ValidationException,
)
from core.testing import create_movie, create_user


class TestRoundAverage(TestCase):
    def test_halves_round_up(self):
        """8.25 rounds to 8.3, not banker's 8.2."""
        self.assertEqual(RatingService.round_average(33, 4), 8.3)

    def test_one_decimal(self):
        self.assertEqual(RatingService.round_average(10, 3), 3.3)
        self.assertEqual(RatingService.round_average(20, 3), 6.7)


class TestCalculateAverageRating(TestCase):
    def setUp(self):
        self.service = RatingService()
        self.movie = create_movie()

    def _rate(self, *scores):
        for score in scores:
            self.service.create_rating(create_user(), self.movie.id, score)
        self.movie.refresh_from_db()

    def test_mean_of_four_ratings(self):
        self._rate(8, 9, 9, 10)

        self.assertEqual(self.movie.average_rating, 9.0)
        self.assertEqual(self.movie.total_ratings, 4)

    def test_no_ratings_gives_zero(self):
        result = self.service.calculate_average_rating(self.movie.id)

        self.assertEqual(result, {"average_rating": 0.0, "total_ratings": 0})
        self.movie.refresh_from_db()
        self.assertEqual(self.movie.average_rating, 0)
        self.assertEqual(self.movie.total_ratings, 0)

    def test_recompute_is_idempotent(self):
        self._rate(3, 4)
        first = self.service.calculate_average_rating(self.movie.id)
        second = self.service.calculate_average_rating(self.movie.id)

        self.assertEqual(first, second)
        self.assertEqual(first["average_rating"], 3.5)

    def test_rounding_is_stored(self):
        self._rate(8, 8, 8, 9)

        self.assertEqual(self.movie.average_rating, 8.3)


class TestRatingDistribution(TestCase):
    def setUp(self):
        self.service = RatingService()
        self.movie = create_movie()

    def test_dense_keys_for_unrated_movie(self):
        distribution = self.service.get_rating_distribution(self.movie.id)

        self.assertEqual(list(distribution.keys()), list(range(1, 11)))
        self.assertEqual(sum(distribution.values()), 0)

    def test_counts_sum_to_total(self):
        for score in (1, 5, 5, 10):
            self.service.create_rating(create_user(), self.movie.id, score)

        distribution = self.service.get_rating_distribution(self.movie.id)
        self.movie.refresh_from_db()

        self.assertEqual(distribution[5], 2)
        self.assertEqual(distribution[1], 1)
        self.assertEqual(distribution[7], 0)
        self.assertEqual(sum(distribution.values()), self.movie.total_ratings)

    def test_stats_for_missing_movie(self):
        with self.assertRaises(MovieNotFoundException):
            self.service.get_rating_stats(999999)


class TestRatingMutations(TestCase):
    def setUp(self):
        self.service = RatingService()
        self.user = create_user()
        self.movie = create_movie()

    def test_second_rating_conflicts_and_keeps_original(self):
        self.service.create_rating(self.user, self.movie.id, 6)

        with self.assertRaises(ConflictException):
            self.service.create_rating(self.user, self.movie.id, 2)

        rating = Rating.objects.get(user=self.user, movie=self.movie)
        self.assertEqual(rating.score, 6)
        self.movie.refresh_from_db()
        self.assertEqual(self.movie.total_ratings, 1)
        self.assertEqual(self.movie.average_rating, 6.0)

    def test_score_out_of_range(self):
        with self.assertRaises(ValidationException):
            self.service.create_rating(self.user, self.movie.id, 11)
        with self.assertRaises(ValidationException):
            self.service.create_rating(self.user, self.movie.id, 0)

    def test_inactive_movie_cannot_be_rated(self):
        self.movie.deactivate()

        with self.assertRaises(MovieNotFoundException):
            self.service.create_rating(self.user, self.movie.id, 7)

    def test_update_recomputes(self):
        self.service.create_rating(self.user, self.movie.id, 4)
        self.service.create_rating(create_user(), self.movie.id, 6)

        self.service.update_rating(self.user, self.movie.id, 10)
        self.movie.refresh_from_db()

        self.assertEqual(self.movie.average_rating, 8.0)

    def test_update_missing_rating(self):
        with self.assertRaises(NotFoundException):
            self.service.update_rating(self.user, self.movie.id, 5)

    def test_delete_recomputes(self):
        self.service.create_rating(self.user, self.movie.id, 2)
        self.service.create_rating(create_user(), self.movie.id, 8)

        aggregate = self.service.delete_rating(self.user, self.movie.id)

        self.assertEqual(aggregate, {"average_rating": 8.0, "total_ratings": 1})

    def test_user_ratings_are_paginated(self):
        for _ in range(3):
            self.service.create_rating(self.user, create_movie().id, 7)

        result = self.service.get_user_ratings(self.user.id, page=1, limit=2)

        self.assertEqual(len(result["ratings"]), 2)
        self.assertEqual(result["pagination"]["total"], 3)
        self.assertEqual(result["pagination"]["pages"], 2)
