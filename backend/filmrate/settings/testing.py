"""
Test settings for FilmRate

Runs against an in-memory SQLite database with fast password hashing.
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Throttling is exercised explicitly in the throttle tests
REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

LOGGING["loggers"]["apps"]["level"] = "WARNING"
LOGGING["loggers"]["core"]["level"] = "WARNING"
