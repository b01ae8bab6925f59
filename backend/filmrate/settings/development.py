"""
Development settings for FilmRate

Inherits from base.py and adds development-specific configurations
"""

from decouple import config

from .base import *

# ===========================
# DEBUG SETTINGS
# ===========================
DEBUG = config("DEBUG", default=True, cast=bool)

# ===========================
# ALLOWED HOSTS
# ===========================
ALLOWED_HOSTS = config(
    "ALLOWED_HOSTS",
    default="localhost,127.0.0.1,0.0.0.0",
    cast=lambda v: [s.strip() for s in v.split(",") if s.strip()],
)

ALLOWED_HOSTS.append("testserver")

# ===========================
# CORS SETTINGS - DEVELOPMENT
# ===========================
CORS_ALLOWED_ORIGINS = [
    CLIENT_URL,
    "http://127.0.0.1:3000",
    "http://localhost:5173",  # Vite default
    "http://127.0.0.1:5173",
]

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

# ===========================
# LOGGING FOR DEBUGGING
# ===========================
LOGGING["loggers"]["apps"]["level"] = "DEBUG"
LOGGING["loggers"]["corsheaders"] = {
    "handlers": ["console"],
    "level": "DEBUG",
    "propagate": True,
}
