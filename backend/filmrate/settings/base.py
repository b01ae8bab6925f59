"""
Base settings for FilmRate project.

This file contains settings that are SHARED across all environments.
Environment-specific settings go in development.py, production.py, testing.py
"""

from datetime import timedelta
from pathlib import Path

import dj_database_url
from decouple import config

# ================================================================
# PATHS & DIRECTORIES
# ================================================================
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ================================================================
# SECURITY SETTINGS
# ================================================================
SECRET_KEY = config(
    "SECRET_KEY", default="django-insecure-filmrate-k2#p0v@8s!e4x^3m-l7w1q9r6t(b5"
)

DEBUG = config("DEBUG", default=False, cast=bool)

ALLOWED_HOSTS = config(
    "ALLOWED_HOSTS",
    default="",
    cast=lambda v: [s.strip() for s in v.split(",") if s.strip()],
)

# ================================================================
# APPLICATION
# ================================================================
APP_NAME = "FilmRate"
APP_VERSION = "1.0.0"
PORT = config("PORT", default=5000, cast=int)

# ================================================================
# CUSTOM USER MODEL
# ================================================================
AUTH_USER_MODEL = "authentication.User"

# ================================================================
# APPLICATION DEFINITION
# ================================================================
# Django core apps
DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

# Third-party apps
THIRD_PARTY_APPS = [
    "rest_framework",
    "rest_framework_simplejwt.token_blacklist",
    "corsheaders",
    "drf_spectacular",
]

# Local apps
LOCAL_APPS = [
    "core",
    "apps.authentication",
    "apps.movies",
    "apps.ratings",
    "apps.reviews",
    "apps.lists",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# ================================================================
# CORS SETTINGS (Cross-Origin Resource Sharing)
# ================================================================
CLIENT_URL = config("CLIENT_URL", default="http://localhost:3000")

CORS_ALLOWED_ORIGINS = [CLIENT_URL]

CORS_ALLOW_CREDENTIALS = config("CORS_ALLOW_CREDENTIALS", default=True, cast=bool)

CORS_ALLOW_METHODS = [
    "DELETE",
    "GET",
    "OPTIONS",
    "PATCH",
    "POST",
    "PUT",
]

CORS_ALLOW_HEADERS = [
    "accept",
    "authorization",
    "content-type",
    "user-agent",
    "x-csrftoken",
    "x-requested-with",
]

# ================================================================
# MIDDLEWARE CONFIGURATION
# ================================================================

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ================================================================
# RATE LIMITING
# ================================================================
RATE_LIMIT = {
    "WINDOW_MINUTES": config("RATE_LIMIT_WINDOW", default=15, cast=int),
    "MAX_REQUESTS": config("RATE_LIMIT_MAX_REQUESTS", default=100, cast=int),
}

# ================================================================
# PAGINATION
# ================================================================
PAGINATION = {
    "DEFAULT_PAGE": 1,
    "DEFAULT_LIMIT": config("PAGINATION_DEFAULT_LIMIT", default=20, cast=int),
    "MAX_LIMIT": config("PAGINATION_MAX_LIMIT", default=100, cast=int),
}

# ================================================================
# REST FRAMEWORK CONFIGURATION
# ================================================================
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.authentication.BlacklistJWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ],
    "DEFAULT_THROTTLE_CLASSES": [
        "core.throttling.WindowRateThrottle",
    ],
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# ================================================================
# JWT CONFIGURATION
# ================================================================
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(days=1),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
    "ROTATE_REFRESH_TOKENS": True,
    "BLACKLIST_AFTER_ROTATION": True,
    "UPDATE_LAST_LOGIN": True,
    "ALGORITHM": "HS256",
    "SIGNING_KEY": SECRET_KEY,
    "VERIFYING_KEY": None,
    "AUTH_HEADER_TYPES": ("Bearer",),
    "AUTH_HEADER_NAME": "HTTP_AUTHORIZATION",
    "USER_ID_FIELD": "id",
    "USER_ID_CLAIM": "user_id",
    "USER_AUTHENTICATION_RULE": (
        "rest_framework_simplejwt.authentication.default_user_authentication_rule"
    ),
}

# ================================================================
# URL CONFIGURATION
# ================================================================
ROOT_URLCONF = "filmrate.urls"

# ================================================================
# TEMPLATE CONFIGURATION
# ================================================================
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# ================================================================
# WSGI CONFIGURATION
# ================================================================
WSGI_APPLICATION = "filmrate.wsgi.application"

# ================================================================
# DATABASE CONFIGURATION
# ================================================================
ENVIRONMENT = config("ENVIRONMENT", default="development")

if ENVIRONMENT == "production":
    # Production: Use DATABASE_URL
    DATABASE_URL = config("DATABASE_URL")
    DATABASES = {
        "default": dj_database_url.parse(
            DATABASE_URL,
            conn_max_age=600,
            conn_health_checks=True,
        )
    }
else:
    # Development: Use local database settings
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": config("DB_NAME", default="filmrate_dev"),
            "USER": config("DB_USER", default="filmrate_user"),
            "PASSWORD": config("DB_PASSWORD", default="filmrate"),
            "HOST": config("DB_HOST", default="localhost"),
            "PORT": config("DB_PORT", default="5432"),
            "CONN_MAX_AGE": 600,
            "OPTIONS": {
                "connect_timeout": 10,
            },
        }
    }

# ================================================================
# PASSWORD VALIDATION
# ================================================================
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "UserAttributeSimilarityValidator"
        ),
    },
    {
        "NAME": ("django.contrib.auth.password_validation." "MinimumLengthValidator"),
        "OPTIONS": {"min_length": 6},
    },
    {
        "NAME": "core.validators.PasswordStrengthValidator",
    },
]

# ================================================================
# INTERNATIONALIZATION
# ================================================================
LANGUAGE_CODE = config("LANGUAGE_CODE", default="en-us")
TIME_ZONE = config("TIME_ZONE", default="UTC")
USE_I18N = config("USE_I18N", default=True, cast=bool)
USE_TZ = config("USE_TZ", default=True, cast=bool)

# ================================================================
# STATIC FILES CONFIGURATION
# ================================================================
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ================================================================
# DEFAULT PRIMARY KEY FIELD TYPE
# ================================================================
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ================================================================
# LOGGING
# ================================================================
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "core": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": True,
        },
    },
}

# ================================================================
# API DOCUMENTATION CONFIGURATION (DRF-Spectacular)
# ================================================================
SPECTACULAR_SETTINGS = {
    "TITLE": "FilmRate API",
    "DESCRIPTION": """
    Movie rating platform API built with Django REST Framework.

    Features:
    - Movie catalog with advanced search, autocomplete and filter options
    - User ratings with aggregated averages and score distributions
    - Reviews with helpfulness voting and moderation
    - Trending, top-rated, similar and personalized recommendations
    - Watchlists and custom movie lists
    - JWT authentication with token blacklisting
    """,
    "VERSION": APP_VERSION,
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "COMPONENT_NO_READ_ONLY_REQUIRED": True,
    "SCHEMA_PATH_PREFIX": "/api/",
    "DISABLE_AUTO_TAGS": True,
    "TAGS": [
        {"name": "Authentication", "description": "Registration, login, profile"},
        {"name": "Movies - Public", "description": "Catalog browsing"},
        {"name": "Movies - Search", "description": "Search, autocomplete, filters"},
        {
            "name": "Movies - Discovery",
            "description": "Trending, top-rated, similar and personalized movies",
        },
        {"name": "Ratings", "description": "User ratings and rating statistics"},
        {"name": "Reviews", "description": "Reviews and helpfulness votes"},
        {"name": "Lists", "description": "Watchlist and custom movie lists"},
        {"name": "Admin", "description": "User, movie and review moderation"},
    ],
    "SWAGGER_UI_SETTINGS": {
        "deepLinking": True,
        "persistAuthorization": True,
        "displayRequestDuration": True,
    },
}
