"""
API tests for list and watchlist endpoints.
"""

from rest_framework import status
from rest_framework.test import APITestCase

from django.urls import reverse

from apps.lists.services import ListService
from core.testing import auth_header, create_genre, create_movie, create_user


class TestWatchlistEndpoints(APITestCase):
    def setUp(self):
        self.user = create_user()
        self.movie = create_movie()
        self.url = reverse("lists:watchlist-item", kwargs={"movie_id": self.movie.id})

    def test_add_conflict_and_remove(self):
        headers = auth_header(self.user)

        added = self.client.post(self.url, **headers)
        duplicate = self.client.post(self.url, **headers)
        listing = self.client.get(reverse("lists:watchlist"), **headers)
        removed = self.client.delete(self.url, **headers)
        missing = self.client.delete(self.url, **headers)

        self.assertEqual(added.status_code, status.HTTP_201_CREATED)
        self.assertEqual(added.data["data"]["entry"]["movie"]["id"], self.movie.id)
        self.assertEqual(duplicate.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(len(listing.data["data"]["watchlist"]), 1)
        self.assertEqual(removed.status_code, status.HTTP_200_OK)
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_authentication(self):
        response = self.client.get(reverse("lists:watchlist"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TestListEndpoints(APITestCase):
    def setUp(self):
        self.owner = create_user()
        self.movie = create_movie()

    def test_create_and_browse(self):
        response = self.client.post(
            reverse("lists:collection"),
            {"name": "Sunday noir", "movie_ids": [self.movie.id]},
            format="json",
            **auth_header(self.owner),
        )
        browse = self.client.get(reverse("lists:collection"))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["list"]["movie_count"], 1)
        self.assertEqual(browse.data["data"]["lists"][0]["name"], "Sunday noir")

    def test_anonymous_cannot_create(self):
        response = self.client.post(
            reverse("lists:collection"), {"name": "Nope"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unknown_movie_id(self):
        response = self.client.post(
            reverse("lists:collection"),
            {"name": "Ghosts", "movie_ids": [999999]},
            format="json",
            **auth_header(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("movie_ids", response.data["errors"]["field_errors"])

    def test_private_list_is_404_for_others(self):
        movie_list = ListService().create_list(self.owner, "Private", is_public=False)
        url = reverse("lists:detail", kwargs={"list_id": movie_list.id})

        stranger = self.client.get(url, **auth_header(create_user()))
        owner = self.client.get(url, **auth_header(self.owner))

        self.assertEqual(stranger.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(owner.status_code, status.HTTP_200_OK)

    def test_editing_public_list_of_another_user_is_forbidden(self):
        movie_list = ListService().create_list(self.owner, "Public")
        url = reverse("lists:detail", kwargs={"list_id": movie_list.id})

        response = self.client.put(
            url, {"name": "Hijacked"}, format="json", **auth_header(create_user())
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_owner_partial_update(self):
        movie_list = ListService().create_list(self.owner, "Draft")
        url = reverse("lists:detail", kwargs={"list_id": movie_list.id})

        response = self.client.put(
            url, {"is_public": False}, format="json", **auth_header(self.owner)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["list"]["name"], "Draft")
        self.assertFalse(response.data["data"]["list"]["is_public"])

    def test_user_lists_hide_private_from_others(self):
        service = ListService()
        service.create_list(self.owner, "Open")
        service.create_list(self.owner, "Closed", is_public=False)

        response = self.client.get(
            reverse("lists:user-lists", kwargs={"user_id": self.owner.id})
        )

        self.assertEqual(response.data["data"]["pagination"]["total"], 1)


class TestSimilarEndpoint(APITestCase):
    def test_similar_movies(self):
        drama = create_genre("Drama")
        movie = create_movie(genres=[drama])
        match = create_movie(genres=[drama])
        create_movie()

        response = self.client.get(
            reverse("lists:similar", kwargs={"movie_id": movie.id})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([m["id"] for m in response.data["data"]["movies"]], [match.id])

    def test_unknown_movie(self):
        response = self.client.get(reverse("lists:similar", kwargs={"movie_id": 999999}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
