"""
Tests for registration, login, logout and profile endpoints.
"""

from rest_framework import status
from rest_framework.test import APITestCase

from django.contrib.auth import get_user_model
from django.urls import reverse

from core.testing import TEST_PASSWORD, auth_header, create_user

User = get_user_model()


class TestRegistration(APITestCase):
    def setUp(self):
        self.url = reverse("authentication:register")

    def payload(self, **overrides):
        data = {
            "username": "night_owl",
            "email": "Night.Owl@Example.com",
            "password": TEST_PASSWORD,
            "password_confirm": TEST_PASSWORD,
        }
        data.update(overrides)
        return data

    def test_register_returns_user_and_tokens(self):
        response = self.client.post(self.url, self.payload(), format="json")
        data = response.data["data"]

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(data["user"]["email"], "night.owl@example.com")
        self.assertEqual(data["user"]["role"], "user")
        self.assertIn("access", data["tokens"])
        self.assertIn("refresh", data["tokens"])
        self.assertNotIn("password", data["user"])

    def test_duplicate_email_conflicts(self):
        create_user(email="night.owl@example.com")

        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_duplicate_username_conflicts(self):
        create_user(username="night_owl", email="other@example.com")

        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_password_mismatch(self):
        response = self.client.post(
            self.url, self.payload(password_confirm="Different2024"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password_confirm", response.data["errors"]["field_errors"])

    def test_weak_password(self):
        response = self.client.post(
            self.url,
            self.payload(password="abc", password_confirm="abc"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data["errors"]["field_errors"])
        self.assertFalse(User.objects.filter(username="night_owl").exists())

    def test_invalid_username(self):
        response = self.client.post(
            self.url, self.payload(username="no spaces!"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class TestLogin(APITestCase):
    def setUp(self):
        self.url = reverse("authentication:login")
        self.user = create_user(email="viewer@example.com")

    def test_login(self):
        response = self.client.post(
            self.url,
            {"email": "VIEWER@example.com", "password": TEST_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["tokens"]["token_type"], "Bearer")
        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)

    def test_wrong_password(self):
        response = self.client.post(
            self.url,
            {"email": "viewer@example.com", "password": "Wrong2024"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unknown_email(self):
        response = self.client.post(
            self.url,
            {"email": "nobody@example.com", "password": TEST_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_deactivated_account(self):
        self.user.is_active = False
        self.user.save()

        response = self.client.post(
            self.url,
            {"email": "viewer@example.com", "password": TEST_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TestLogout(APITestCase):
    def setUp(self):
        create_user(email="leaving@example.com")
        login = self.client.post(
            reverse("authentication:login"),
            {"email": "leaving@example.com", "password": TEST_PASSWORD},
            format="json",
        )
        self.tokens = login.data["data"]["tokens"]
        self.headers = {"HTTP_AUTHORIZATION": f"Bearer {self.tokens['access']}"}

    def test_logout_revokes_both_tokens(self):
        response = self.client.post(
            reverse("authentication:logout"),
            {"refresh": self.tokens["refresh"]},
            format="json",
            **self.headers,
        )
        profile = self.client.get(reverse("authentication:profile"), **self.headers)
        refreshed = self.client.post(
            reverse("authentication:token-refresh"),
            {"refresh": self.tokens["refresh"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(profile.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(refreshed.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_invalid_refresh_token(self):
        response = self.client.post(
            reverse("authentication:logout"),
            {"refresh": "not-a-token"},
            format="json",
            **self.headers,
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("refresh", response.data["errors"]["field_errors"])

    def test_requires_authentication(self):
        response = self.client.post(
            reverse("authentication:logout"),
            {"refresh": self.tokens["refresh"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TestProfile(APITestCase):
    def setUp(self):
        self.url = reverse("authentication:profile")
        self.user = create_user()

    def test_get_profile(self):
        response = self.client.get(self.url, **auth_header(self.user))

        self.assertEqual(response.data["data"]["user"]["username"], self.user.username)

    def test_update_bio(self):
        response = self.client.put(
            self.url,
            {"bio": "Mostly westerns."},
            format="json",
            **auth_header(self.user),
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.bio, "Mostly westerns.")

    def test_username_taken(self):
        create_user(username="taken_name")

        response = self.client.put(
            self.url,
            {"username": "Taken_Name"},
            format="json",
            **auth_header(self.user),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("username", response.data["errors"]["field_errors"])
