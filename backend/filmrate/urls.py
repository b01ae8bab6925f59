"""
Main project URL configuration.
"""
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from django.conf import settings
from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path

from core.responses import APIResponse

API_ENDPOINTS = {
    "authentication": "/api/auth/",
    "movies": "/api/movies/",
    "reviews": "/api/reviews/",
    "lists": "/api/lists/",
    "admin": "/api/admin/",
}


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint providing basic information and navigation."""
    return APIResponse.success(
        message=f"Welcome to {settings.APP_NAME} API",
        data={
            "version": settings.APP_VERSION,
            "documentation": {
                "swagger": request.build_absolute_uri("/api/docs/"),
                "redoc": request.build_absolute_uri("/api/redoc/"),
                "schema": request.build_absolute_uri("/api/schema/"),
            },
            "endpoints": API_ENDPOINTS,
            "status": "active",
        },
    )


def custom_404_view(request, exception=None):
    """Return JSON 404 response for unknown endpoints."""
    return JsonResponse(
        {
            "success": False,
            "message": "API endpoint not found",
            "errors": {"available_endpoints": API_ENDPOINTS},
        },
        status=404,
    )


urlpatterns = [
    # API Root
    path("api/", api_root, name="api-root"),
    # Django admin
    path("django-admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # API endpoints
    path("api/", include("api.v1.urls")),
]

# Custom error handlers
handler404 = custom_404_view
