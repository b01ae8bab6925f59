"""
Tests for admin user management and dashboard statistics.
"""

from rest_framework import status
from rest_framework.test import APITestCase

from django.contrib.auth import get_user_model
from django.urls import reverse

from apps.lists.services import ListService
from apps.ratings.services import RatingService
from apps.reviews.services import ReviewService
from core.testing import auth_header, create_admin, create_movie, create_user

User = get_user_model()

CONTENT = "A quiet film that stays with you for days."


class AdminAPITestCase(APITestCase):
    def setUp(self):
        self.admin = create_admin(username="head_admin")
        self.headers = auth_header(self.admin)


class TestUserListing(AdminAPITestCase):
    def test_regular_user_is_forbidden(self):
        response = self.client.get(
            reverse("admin_api:users"), **auth_header(create_user())
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_anonymous_is_unauthorized(self):
        response = self.client.get(reverse("admin_api:users"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_search_and_role_filters(self):
        create_user(username="film_buff")
        create_user(username="someone_else")

        searched = self.client.get(
            reverse("admin_api:users"), {"search": "buff"}, **self.headers
        )
        admins = self.client.get(
            reverse("admin_api:users"), {"role": "admin"}, **self.headers
        )

        self.assertEqual(
            [u["username"] for u in searched.data["data"]["users"]], ["film_buff"]
        )
        self.assertEqual(
            [u["username"] for u in admins.data["data"]["users"]], ["head_admin"]
        )

    def test_invalid_role_filter(self):
        response = self.client.get(
            reverse("admin_api:users"), {"role": "owner"}, **self.headers
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_detail_counts(self):
        user = create_user()
        movie = create_movie()
        ReviewService().create_review(user, movie.id, 7, CONTENT)
        RatingService().create_rating(user, create_movie().id, 4)
        ListService().create_list(user, "Favourites")

        response = self.client.get(
            reverse("admin_api:user-detail", kwargs={"user_id": user.id}),
            **self.headers,
        )
        data = response.data["data"]["user"]

        self.assertEqual(data["review_count"], 1)
        self.assertEqual(data["rating_count"], 2)
        self.assertEqual(data["list_count"], 1)

    def test_unknown_user(self):
        response = self.client.get(
            reverse("admin_api:user-detail", kwargs={"user_id": 999999}),
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class TestUserManagement(AdminAPITestCase):
    def test_promote_user(self):
        user = create_user()

        response = self.client.put(
            reverse("admin_api:user-role", kwargs={"user_id": user.id}),
            {"role": "admin"},
            format="json",
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.role, "admin")

    def test_cannot_demote_self(self):
        response = self.client.put(
            reverse("admin_api:user-role", kwargs={"user_id": self.admin.id}),
            {"role": "user"},
            format="json",
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_deactivated_user_cannot_log_in(self):
        user = create_user(email="suspended@example.com")

        response = self.client.put(
            reverse("admin_api:user-status", kwargs={"user_id": user.id}),
            {"is_active": False},
            format="json",
            **self.headers,
        )
        login = self.client.post(
            reverse("authentication:login"),
            {"email": "suspended@example.com", "password": "FilmRate2024"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["data"]["user"]["is_active"])
        self.assertEqual(login.status_code, status.HTTP_403_FORBIDDEN)

    def test_cannot_deactivate_self(self):
        response = self.client.put(
            reverse("admin_api:user-status", kwargs={"user_id": self.admin.id}),
            {"is_active": False},
            format="json",
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_user_recomputes_aggregates(self):
        movie = create_movie()
        leaving, staying = create_user(), create_user()
        RatingService().create_rating(leaving, movie.id, 2)
        RatingService().create_rating(staying, movie.id, 8)

        response = self.client.delete(
            reverse("admin_api:user-detail", kwargs={"user_id": leaving.id}),
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(User.objects.filter(pk=leaving.id).exists())
        movie.refresh_from_db()
        self.assertEqual(movie.average_rating, 8.0)
        self.assertEqual(movie.total_ratings, 1)

    def test_delete_voter_withdraws_votes(self):
        movie = create_movie()
        author, voter = create_user(), create_user()
        review = ReviewService().create_review(author, movie.id, 7, CONTENT)
        ReviewService().vote_review(voter, review.id, "helpful")

        response = self.client.delete(
            reverse("admin_api:user-detail", kwargs={"user_id": voter.id}),
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        review.refresh_from_db()
        self.assertEqual(review.helpful_votes, 0)
        self.assertFalse(review.votes.exists())

    def test_cannot_delete_self(self):
        response = self.client.delete(
            reverse("admin_api:user-detail", kwargs={"user_id": self.admin.id}),
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TestDashboardStats(AdminAPITestCase):
    def test_totals_and_recent_activity(self):
        user = create_user()
        movie = create_movie()
        ReviewService().create_review(user, movie.id, 9, CONTENT)
        create_movie(is_active=False)

        response = self.client.get(reverse("admin_api:stats"), **self.headers)
        data = response.data["data"]

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(data["totals"]["users"], 2)
        self.assertEqual(data["totals"]["movies"], 2)
        self.assertEqual(data["totals"]["active_movies"], 1)
        self.assertEqual(data["totals"]["reviews"], 1)
        self.assertEqual(data["totals"]["ratings"], 1)
        self.assertEqual(len(data["recent_reviews"]), 1)
        self.assertEqual(data["top_movies"], [])
