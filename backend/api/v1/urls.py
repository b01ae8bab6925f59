"""
Main URL routing for the API.
All endpoints are routed through here.
"""
from django.urls import include, path

urlpatterns = [
    # Authentication endpoints
    path("auth/", include("api.v1.authentication.urls")),
    # Movie catalog, discovery and rating endpoints
    path("movies/", include("api.v1.movies.urls")),
    # Review endpoints
    path("reviews/", include("api.v1.reviews.urls")),
    # Watchlist and custom list endpoints
    path("lists/", include("api.v1.lists.urls")),
    # Admin moderation endpoints
    path("admin/", include("api.v1.admin.urls")),
]
