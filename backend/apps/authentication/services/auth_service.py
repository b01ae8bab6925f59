"""
Authentication services for FilmRate.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from typing import TYPE_CHECKING, Dict, Optional

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import (
    BlacklistedToken,
    OutstandingToken,
)
from rest_framework_simplejwt.tokens import RefreshToken

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from core.constants import Messages
from core.exceptions import (
    AccountSuspendedException,
    ConflictException,
    InvalidCredentialsException,
    TokenInvalidException,
)

# Type hints only (not runtime imports)
if TYPE_CHECKING:
    from ..models import User
else:
    from django.contrib.auth import get_user_model

    User = get_user_model()

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Authentication service for FilmRate.
    Handles registration, login, logout and the user's own profile.
    """

    @staticmethod
    def register_user(username: str, email: str, password: str) -> Dict:
        """
        Create an account and log it in.

        Raises:
            ConflictException: Email or username already registered
        """
        email = email.lower().strip()

        if User.objects.filter(email__iexact=email).exists():
            raise ConflictException(Messages.EMAIL_TAKEN)
        if User.objects.filter(username__iexact=username).exists():
            raise ConflictException(Messages.USERNAME_TAKEN)

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email, password=password, username=username
                )
        except IntegrityError:
            logger.warning(f"Registration race for {email}")
            raise ConflictException(Messages.EMAIL_TAKEN)

        logger.info(f"User registered: {user.email}")
        return {"user": user, "tokens": AuthenticationService.generate_jwt_tokens(user)}

    @staticmethod
    def authenticate_user(email: str, password: str) -> Dict:
        """
        Authenticate user with email/password.

        Returns:
            Dict containing user and tokens

        Raises:
            InvalidCredentialsException: Unknown email or wrong password
            AccountSuspendedException: Account deactivated by an admin
        """
        email = email.lower().strip()

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            logger.warning(f"Failed login attempt for non-existent user: {email}")
            raise InvalidCredentialsException(Messages.INVALID_CREDENTIALS)

        if not user.check_password(password):
            logger.warning(f"Failed login attempt - wrong password for: {email}")
            raise InvalidCredentialsException(Messages.INVALID_CREDENTIALS)

        if not user.is_active:
            logger.warning(f"Inactive user login attempt: {email}")
            raise AccountSuspendedException(Messages.ACCOUNT_DEACTIVATED)

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])

        logger.info(f"User authenticated successfully: {email}")
        return {"user": user, "tokens": AuthenticationService.generate_jwt_tokens(user)}

    @staticmethod
    def generate_jwt_tokens(user: "User") -> Dict[str, str]:
        """
        Generate JWT access and refresh tokens for user.
        """
        refresh = RefreshToken.for_user(user)
        access_token = refresh.access_token

        access_token["email"] = user.email
        access_token["user_role"] = user.role

        access_lifetime = settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]

        return {
            "access": str(access_token),
            "refresh": str(refresh),
            "token_type": "Bearer",
            "expires_in": access_lifetime.total_seconds(),
        }

    @staticmethod
    @transaction.atomic
    def logout_user(user: "User", refresh_token: str, access_token=None) -> None:
        """
        Revoke the session's tokens.

        The refresh token is blacklisted. When the current access token is
        given, its ``jti`` is blacklisted too so it stops authenticating
        before it expires.

        Raises:
            TokenInvalidException: Refresh token malformed, expired or not
                issued to this user
        """
        try:
            refresh = RefreshToken(refresh_token)
        except TokenError as e:
            logger.warning(f"Logout with invalid refresh token: {e}")
            raise TokenInvalidException("Invalid or expired refresh token")

        if str(refresh.payload.get("user_id")) != str(user.id):
            raise TokenInvalidException("Refresh token does not belong to this user")

        refresh.blacklist()

        if access_token is not None:
            AuthenticationService._blacklist_access_token(user, access_token)

        logger.info(f"User logged out: {user.email}")

    @staticmethod
    def update_profile(user: "User", data: Dict) -> "User":
        for field_name, value in data.items():
            setattr(user, field_name, value)
        user.save()

        logger.info(f"Profile updated for user: {user.email}")
        return user

    # ================================================================
    # HELPER METHODS (Private)
    # ================================================================

    @staticmethod
    def _blacklist_access_token(user: "User", access_token) -> Optional[BlacklistedToken]:
        jti = access_token.get("jti")
        if not jti:
            return None

        expires_at = datetime.fromtimestamp(access_token["exp"], tz=dt_timezone.utc)
        outstanding, _ = OutstandingToken.objects.get_or_create(
            jti=jti,
            defaults={
                "user": user,
                "token": str(access_token),
                "expires_at": expires_at,
            },
        )
        blacklisted, _ = BlacklistedToken.objects.get_or_create(token=outstanding)
        return blacklisted
