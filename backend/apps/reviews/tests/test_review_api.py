"""
API tests for review, vote and moderation endpoints.
"""

from rest_framework import status
from rest_framework.test import APITestCase

from django.urls import reverse

from apps.reviews.models import Review
from apps.reviews.services import ReviewService
from core.testing import auth_header, create_admin, create_movie, create_user

CONTENT = "Slow burn that pays off in the last twenty minutes."


class TestReviewEndpoints(APITestCase):
    def setUp(self):
        self.user = create_user()
        self.movie = create_movie()
        self.url = reverse("reviews:create")

    def payload(self, **overrides):
        data = {"movie_id": self.movie.id, "rating": 8, "content": CONTENT}
        data.update(overrides)
        return data

    def test_create_review(self):
        response = self.client.post(
            self.url, self.payload(), format="json", **auth_header(self.user)
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["review"]["rating"], 8)
        self.assertEqual(
            response.data["data"]["review"]["user"]["username"], self.user.username
        )
        self.movie.refresh_from_db()
        self.assertEqual(self.movie.total_reviews, 1)

    def test_duplicate_review_conflicts(self):
        headers = auth_header(self.user)
        self.client.post(self.url, self.payload(), format="json", **headers)

        response = self.client.post(
            self.url, self.payload(rating=2), format="json", **headers
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_short_content_is_rejected(self):
        response = self.client.post(
            self.url,
            self.payload(content="   meh    "),
            format="json",
            **auth_header(self.user),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("content", response.data["errors"]["field_errors"])

    def test_anonymous_cannot_review(self):
        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_edit_and_delete_own_review(self):
        review = ReviewService().create_review(self.user, self.movie.id, 8, CONTENT)
        url = reverse("reviews:detail", kwargs={"review_id": review.id})
        headers = auth_header(self.user)

        updated = self.client.put(url, {"rating": 5}, format="json", **headers)
        deleted = self.client.delete(url, **headers)

        self.assertEqual(updated.status_code, status.HTTP_200_OK)
        self.assertTrue(updated.data["data"]["review"]["is_edited"])
        self.assertEqual(deleted.status_code, status.HTTP_200_OK)
        self.assertEqual(deleted.data["data"]["total_ratings"], 0)

    def test_empty_edit_is_rejected(self):
        review = ReviewService().create_review(self.user, self.movie.id, 8, CONTENT)
        url = reverse("reviews:detail", kwargs={"review_id": review.id})

        response = self.client.put(url, {}, format="json", **auth_header(self.user))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_cannot_edit_someone_elses_review(self):
        review = ReviewService().create_review(self.user, self.movie.id, 8, CONTENT)
        url = reverse("reviews:detail", kwargs={"review_id": review.id})

        response = self.client.put(
            url, {"rating": 1}, format="json", **auth_header(create_user())
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TestVoteEndpoint(APITestCase):
    def setUp(self):
        self.author = create_user()
        self.review = ReviewService().create_review(
            self.author, create_movie().id, 7, CONTENT
        )
        self.url = reverse("reviews:vote", kwargs={"review_id": self.review.id})

    def test_vote_and_conflict(self):
        headers = auth_header(create_user())

        first = self.client.post(self.url, {"vote_type": "helpful"}, format="json", **headers)
        second = self.client.post(self.url, {"vote_type": "helpful"}, format="json", **headers)

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data["data"]["review"]["helpful_votes"], 1)
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)

    def test_own_review_is_forbidden(self):
        response = self.client.post(
            self.url, {"vote_type": "helpful"}, format="json", **auth_header(self.author)
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_invalid_vote_type(self):
        response = self.client.post(
            self.url, {"vote_type": "love"}, format="json", **auth_header(create_user())
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class TestMovieReviewsEndpoint(APITestCase):
    def test_lists_visible_reviews(self):
        movie = create_movie()
        service = ReviewService()
        service.create_review(create_user(), movie.id, 9, CONTENT)
        hidden = service.create_review(create_user(), movie.id, 1, CONTENT)
        service.set_visibility(hidden.id, True)

        response = self.client.get(
            reverse("movies:reviews", kwargs={"movie_id": movie.id})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["data"]["reviews"]), 1)
        self.assertEqual(response.data["data"]["pagination"]["total"], 1)

    def test_unknown_movie(self):
        response = self.client.get(reverse("movies:reviews", kwargs={"movie_id": 999999}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class TestReviewModeration(APITestCase):
    def setUp(self):
        self.admin = create_admin()
        self.review = ReviewService().create_review(
            create_user(), create_movie().id, 6, CONTENT
        )

    def test_regular_user_is_forbidden(self):
        response = self.client.get(
            reverse("admin_api:reviews"), **auth_header(create_user())
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_hide_review(self):
        url = reverse("admin_api:review-visibility", kwargs={"review_id": self.review.id})

        response = self.client.put(
            url, {"is_hidden": True}, format="json", **auth_header(self.admin)
        )
        listing = self.client.get(
            reverse("admin_api:reviews"), {"is_hidden": "true"}, **auth_header(self.admin)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["data"]["review"]["is_hidden"])
        self.assertEqual(listing.data["data"]["reviews"][0]["id"], self.review.id)

    def test_admin_delete(self):
        url = reverse("admin_api:review-delete", kwargs={"review_id": self.review.id})

        response = self.client.delete(url, **auth_header(self.admin))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Review.objects.filter(pk=self.review.id).exists())
