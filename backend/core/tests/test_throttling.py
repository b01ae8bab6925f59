"""
Tests for the fixed window request throttle.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.test import APIRequestFactory, force_authenticate
from rest_framework.views import APIView

from django.core.cache import cache
from django.test import TestCase, override_settings

from core.responses import APIResponse
from core.testing import create_user
from core.throttling import WindowRateThrottle


class PingView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [WindowRateThrottle]

    def get(self, request):
        return APIResponse.success(message="pong")


@override_settings(RATE_LIMIT={"WINDOW_MINUTES": 15, "MAX_REQUESTS": 2})
class TestWindowRateThrottle(TestCase):
    def setUp(self):
        cache.clear()
        self.factory = APIRequestFactory()
        self.view = PingView.as_view()

    def call(self, user=None):
        request = self.factory.get("/ping/")
        if user is not None:
            force_authenticate(request, user=user)
        return self.view(request)

    def test_rate_comes_from_settings(self):
        throttle = WindowRateThrottle()

        self.assertEqual(throttle.num_requests, 2)
        self.assertEqual(throttle.duration, 15 * 60)

    def test_requests_over_the_limit_are_rejected(self):
        responses = [self.call() for _ in range(3)]

        self.assertEqual(
            [r.status_code for r in responses],
            [status.HTTP_200_OK, status.HTTP_200_OK, status.HTTP_429_TOO_MANY_REQUESTS],
        )
        self.assertFalse(responses[-1].data["success"])
        self.assertIn("Retry-After", responses[-1])

    def test_users_have_separate_windows(self):
        first, second = create_user(), create_user()
        self.call(first)
        self.call(first)

        self.assertEqual(self.call(first).status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertEqual(self.call(second).status_code, status.HTTP_200_OK)
