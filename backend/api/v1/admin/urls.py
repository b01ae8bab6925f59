"""
Admin API endpoints.
User management, catalog management, review moderation and statistics.
"""

from django.urls import path

from apps.authentication.views import (
    AdminDashboardStatsView,
    AdminUserDetailView,
    AdminUserListView,
    AdminUserRoleView,
    AdminUserStatusView,
)
from apps.movies.views import AdminMovieCreateView, AdminMovieDetailView
from apps.reviews.views import (
    AdminReviewDeleteView,
    AdminReviewListView,
    AdminReviewVisibilityView,
)

app_name = "admin_api"

urlpatterns = [
    # ================================================================
    # USERS
    # ================================================================
    path("users/", AdminUserListView.as_view(), name="users"),
    path("users/<int:user_id>/", AdminUserDetailView.as_view(), name="user-detail"),
    path("users/<int:user_id>/role/", AdminUserRoleView.as_view(), name="user-role"),
    path(
        "users/<int:user_id>/status/",
        AdminUserStatusView.as_view(),
        name="user-status",
    ),
    # ================================================================
    # MOVIES
    # ================================================================
    path("movies/", AdminMovieCreateView.as_view(), name="movie-create"),
    path(
        "movies/<int:movie_id>/", AdminMovieDetailView.as_view(), name="movie-detail"
    ),
    # ================================================================
    # REVIEWS
    # ================================================================
    path("reviews/", AdminReviewListView.as_view(), name="reviews"),
    path(
        "reviews/<int:review_id>/visibility/",
        AdminReviewVisibilityView.as_view(),
        name="review-visibility",
    ),
    path(
        "reviews/<int:review_id>/",
        AdminReviewDeleteView.as_view(),
        name="review-delete",
    ),
    # ================================================================
    # STATISTICS
    # ================================================================
    path("stats/", AdminDashboardStatsView.as_view(), name="stats"),
]
