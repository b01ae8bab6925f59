"""
Authentication API endpoints.
Handles user registration, login, logout and the user's profile.
"""

from rest_framework_simplejwt.views import TokenRefreshView

from django.urls import path

from apps.authentication.views import (
    UserLoginView,
    UserLogoutView,
    UserProfileView,
    UserRegistrationView,
)

app_name = "authentication"

urlpatterns = [
    # ================================================================
    # CORE AUTHENTICATION
    # ================================================================
    path("register/", UserRegistrationView.as_view(), name="register"),
    path("login/", UserLoginView.as_view(), name="login"),
    path("logout/", UserLogoutView.as_view(), name="logout"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
    # ================================================================
    # PROFILE
    # ================================================================
    path("profile/", UserProfileView.as_view(), name="profile"),
]
