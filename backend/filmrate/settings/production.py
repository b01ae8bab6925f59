"""
Production settings for FilmRate
"""

import dj_database_url
from decouple import config

from .base import *

# ===========================
# DEBUG & SECURITY
# ===========================
DEBUG = config("DEBUG", default=False, cast=bool)
SECRET_KEY = config("SECRET_KEY")

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ===========================
# ALLOWED HOSTS
# ===========================
ALLOWED_HOSTS = [
    "localhost",
    "127.0.0.1",
]

# Add custom domains
custom_hosts = config("ALLOWED_HOSTS", default="", cast=str)
if custom_hosts:
    ALLOWED_HOSTS.extend(
        [host.strip() for host in custom_hosts.split(",") if host.strip()]
    )

# ===========================
# DATABASE
# ===========================
DATABASE_URL = config("DATABASE_URL", default="")

if DATABASE_URL:
    DATABASES = {"default": dj_database_url.parse(DATABASE_URL, conn_max_age=600)}
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": config("DB_NAME"),
            "USER": config("DB_USER"),
            "PASSWORD": config("DB_PASSWORD"),
            "HOST": config("DB_HOST", default="localhost"),
            "PORT": config("DB_PORT", default="5432"),
            "CONN_MAX_AGE": 600,
        }
    }

# ===========================
# CORS
# ===========================
CORS_ALLOWED_ORIGINS = [CLIENT_URL]
CSRF_TRUSTED_ORIGINS = [CLIENT_URL]

# ===========================
# API RENDERING
# ===========================
REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
]
