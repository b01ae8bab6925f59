"""
Tests for the recommendation engine.
"""

from django.test import TestCase

from apps.lists.models import Watchlist
from apps.movies.models import Director, Movie
from apps.movies.services import RecommendationService
from apps.ratings.models import Rating
from core.exceptions import MovieNotFoundException, ValidationException
from core.testing import create_genre, create_movie, create_person, create_user


def set_stats(movie, **fields):
    Movie.objects.filter(pk=movie.pk).update(**fields)
    movie.refresh_from_db()
    return movie


class TestSimilarMovies(TestCase):
    def setUp(self):
        self.service = RecommendationService()
        self.action = create_genre("Action")
        self.drama = create_genre("Drama")
        self.comedy = create_genre("Comedy")

    def test_returns_genre_matches_by_rating(self):
        """Three of five candidates share a genre; they come back best first."""
        source = create_movie(genres=[self.action, self.drama])
        low = set_stats(create_movie(genres=[self.action]), average_rating=5.0)
        high = set_stats(create_movie(genres=[self.drama]), average_rating=9.0)
        mid = set_stats(
            create_movie(genres=[self.action, self.drama]), average_rating=7.0
        )
        create_movie(genres=[self.comedy])
        create_movie()

        similar = self.service.get_similar_movies(source.id)

        self.assertEqual(similar, [high, mid, low])

    def test_never_includes_reference_movie(self):
        source = create_movie(genres=[self.action])
        create_movie(genres=[self.action])

        similar = self.service.get_similar_movies(source.id)

        self.assertNotIn(source, similar)
        self.assertEqual(len(similar), 1)

    def test_excludes_inactive_movies(self):
        source = create_movie(genres=[self.action])
        create_movie(genres=[self.action], is_active=False)

        self.assertEqual(self.service.get_similar_movies(source.id), [])

    def test_missing_movie(self):
        with self.assertRaises(MovieNotFoundException):
            self.service.get_similar_movies(999999)

    def test_limit_must_be_positive(self):
        source = create_movie()
        with self.assertRaises(ValidationException):
            self.service.get_similar_movies(source.id, limit=0)


class TestPopularityLists(TestCase):
    def setUp(self):
        self.service = RecommendationService()

    def test_trending_orders_by_views_then_rating(self):
        a = set_stats(create_movie(), views=10, average_rating=5.0)
        b = set_stats(create_movie(), views=50, average_rating=1.0)
        c = set_stats(create_movie(), views=10, average_rating=8.0)

        self.assertEqual(self.service.get_trending_movies(), [b, c, a])

    def test_top_rated_requires_min_ratings(self):
        popular = set_stats(create_movie(), average_rating=8.0, total_ratings=12)
        set_stats(create_movie(), average_rating=10.0, total_ratings=2)

        self.assertEqual(self.service.get_top_rated_movies(), [popular])
        self.assertEqual(len(self.service.get_top_rated_movies(min_ratings=0)), 2)


class TestPersonalizedRecommendations(TestCase):
    def setUp(self):
        self.service = RecommendationService()
        self.user = create_user()
        self.scifi = create_genre("Sci-Fi")
        self.horror = create_genre("Horror")

    def test_without_high_ratings_equals_trending(self):
        for views in (5, 30, 12):
            set_stats(create_movie(), views=views)
        disliked = create_movie(genres=[self.scifi])
        Rating.objects.create(user=self.user, movie=disliked, score=3)

        self.assertEqual(
            self.service.get_personalized_recommendations(self.user.id, 10),
            self.service.get_trending_movies(10),
        )

    def test_recommends_liked_genres_excluding_rated_and_watchlisted(self):
        liked = create_movie(genres=[self.scifi])
        Rating.objects.create(user=self.user, movie=liked, score=9)

        good = set_stats(
            create_movie(genres=[self.scifi]), average_rating=8.5, total_ratings=20
        )
        better = set_stats(
            create_movie(genres=[self.scifi]), average_rating=9.5, total_ratings=6
        )
        rated = set_stats(
            create_movie(genres=[self.scifi]), average_rating=9.9, total_ratings=40
        )
        Rating.objects.create(user=self.user, movie=rated, score=5)
        saved = set_stats(
            create_movie(genres=[self.scifi]), average_rating=9.8, total_ratings=40
        )
        Watchlist.objects.create(user=self.user, movie=saved)
        set_stats(create_movie(genres=[self.scifi]), average_rating=9.7, total_ratings=2)
        set_stats(create_movie(genres=[self.horror]), average_rating=9.6, total_ratings=50)

        recommendations = self.service.get_personalized_recommendations(self.user.id)

        self.assertEqual(recommendations, [better, good])


class TestBecauseYouWatched(TestCase):
    def test_matches_genre_or_director(self):
        service = RecommendationService()
        user = create_user()
        genre = create_genre("Western")
        director = create_person(Director, "Sergio Leone")

        watched = create_movie(genres=[genre], directors=[director])
        same_genre = create_movie(genres=[genre])
        same_director = create_movie(directors=[director])
        already_rated = create_movie(genres=[genre])
        Rating.objects.create(user=user, movie=already_rated, score=8)
        create_movie()

        result = service.get_because_you_watched_recommendations(user.id, watched.id)

        self.assertCountEqual(result, [same_genre, same_director])


class TestHomepage(TestCase):
    def test_sections(self):
        service = RecommendationService()
        create_movie()

        anonymous = service.get_homepage_recommendations()
        personal = service.get_homepage_recommendations(create_user().id)

        self.assertEqual(set(anonymous), {"trending", "top_rated", "recently_added"})
        self.assertIn("for_you", personal)
        self.assertEqual(len(anonymous["recently_added"]), 1)
