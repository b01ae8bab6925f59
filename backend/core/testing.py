"""
Object factories shared by the app test suites.
"""

from itertools import count

from rest_framework_simplejwt.tokens import RefreshToken

from django.contrib.auth import get_user_model

from apps.movies.models import Genre, Movie
from core.constants import UserRole

TEST_PASSWORD = "FilmRate2024"

_sequence = count(1)


def create_user(username=None, email=None, password=TEST_PASSWORD, **extra_fields):
    n = next(_sequence)
    username = username or f"viewer_{n}"
    email = email or f"{username}@example.com"
    return get_user_model().objects.create_user(
        email=email, password=password, username=username, **extra_fields
    )


def create_admin(username=None, **extra_fields):
    extra_fields.setdefault("role", UserRole.ADMIN)
    return create_user(username=username, **extra_fields)


def create_genre(name):
    return Genre.objects.create(name=name)


def create_person(model, name):
    return model.objects.create(name=name)


def create_movie(title=None, genres=(), directors=(), actors=(), **fields):
    """Create a movie; relations are given as model instances."""
    n = next(_sequence)
    fields.setdefault("description", f"Plot summary for movie {n}.")
    fields.setdefault("release_year", 2000 + n % 20)
    fields.setdefault("duration", 100)

    movie = Movie.objects.create(title=title or f"Movie {n}", **fields)
    if genres:
        movie.genres.set(genres)
    if directors:
        movie.directors.set(directors)
    if actors:
        movie.actors.set(actors)
    return movie


def auth_header(user):
    """``Authorization`` header kwargs for the DRF test client."""
    token = RefreshToken.for_user(user).access_token
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}
