"""
Authentication views for FilmRate.
Handles user registration, login, logout and the user's profile.
"""

import logging

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from django.utils.translation import gettext_lazy as _

from core.constants import Messages
from core.exceptions import (
    AccountSuspendedException,
    ConflictException,
    InvalidCredentialsException,
    TokenInvalidException,
)
from core.responses import APIResponse

from ..serializers import (
    LogoutSerializer,
    UserLoginSerializer,
    UserProfileUpdateSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from ..services import AuthenticationService

logger = logging.getLogger(__name__)


class UserRegistrationView(APIView):
    """
    User registration endpoint. Returns the new user with JWT tokens.
    """

    permission_classes = [AllowAny]
    serializer_class = UserRegistrationSerializer

    @extend_schema(
        operation_id="auth_register",
        summary="User Registration",
        description="Register a new account and receive access and refresh tokens.",
        tags=["Authentication"],
        request=UserRegistrationSerializer,
        responses={
            201: {
                "description": "User registered successfully",
                "example": {
                    "success": True,
                    "message": "Registration successful",
                    "timestamp": "2025-01-15T10:30:00Z",
                    "data": {
                        "user": {"id": 1, "username": "cinephile", "role": "user"},
                        "tokens": {"access": "...", "refresh": "..."},
                    },
                },
            },
            400: {"description": "Validation errors"},
            409: {"description": "Email or username already registered"},
            429: {"description": "Rate limit exceeded"},
        },
        examples=[
            OpenApiExample(
                "Registration Request",
                value={
                    "username": "cinephile",
                    "email": "cinephile@example.com",
                    "password": "SecurePass123",
                    "password_confirm": "SecurePass123",
                },
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        """Handle user registration."""
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Registration data is invalid"),
                field_errors=serializer.errors,
            )

        try:
            result = AuthenticationService.register_user(**serializer.validated_data)
            return APIResponse.registration_success(
                user_data=UserSerializer(result["user"]).data,
                tokens=result["tokens"],
                message=Messages.REGISTER_SUCCESS,
            )

        except ConflictException as e:
            logger.warning(f"Registration conflict: {e.detail}")
            return APIResponse.conflict(message=str(e.detail))


class UserLoginView(APIView):
    """
    User login endpoint with JWT token generation.
    """

    permission_classes = [AllowAny]
    serializer_class = UserLoginSerializer

    @extend_schema(
        operation_id="auth_login",
        summary="User Login",
        description="Authenticate with email and password and receive JWT tokens.",
        tags=["Authentication"],
        request=UserLoginSerializer,
        responses={
            200: {"description": "Login successful"},
            400: {"description": "Validation errors"},
            401: {"description": "Invalid email or password"},
            403: {"description": "Account deactivated"},
        },
        examples=[
            OpenApiExample(
                "Login Request",
                value={"email": "cinephile@example.com", "password": "SecurePass123"},
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        """Handle user login."""
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(
                message=_("Login data is invalid"), field_errors=serializer.errors
            )

        try:
            result = AuthenticationService.authenticate_user(
                serializer.validated_data["email"],
                serializer.validated_data["password"],
            )
            return APIResponse.login_success(
                user_data=UserSerializer(result["user"]).data,
                tokens=result["tokens"],
                message=Messages.LOGIN_SUCCESS,
            )

        except InvalidCredentialsException as e:
            return APIResponse.unauthorized(message=str(e.detail))

        except AccountSuspendedException as e:
            return APIResponse.forbidden(message=str(e.detail))


class UserLogoutView(APIView):
    """
    User logout endpoint. Blacklists the refresh token and the current
    access token.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="auth_logout",
        summary="User Logout",
        tags=["Authentication"],
        request=LogoutSerializer,
        responses={
            200: {"description": "Logout successful"},
            400: {"description": "Missing or invalid refresh token"},
        },
    )
    def post(self, request):
        """Handle user logout."""
        serializer = LogoutSerializer(data=request.data)
        if not serializer.is_valid():
            return APIResponse.validation_error(field_errors=serializer.errors)

        try:
            AuthenticationService.logout_user(
                request.user,
                serializer.validated_data["refresh"],
                access_token=request.auth,
            )
            return APIResponse.logout_success(message=Messages.LOGOUT_SUCCESS)

        except TokenInvalidException as e:
            return APIResponse.validation_error(
                message=str(e.detail),
                field_errors={"refresh": [str(e.detail)]},
            )


class UserProfileView(APIView):
    """
    The authenticated user's own profile.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="auth_profile_get",
        summary="Get Profile",
        tags=["Authentication"],
        responses={200: UserSerializer},
    )
    def get(self, request):
        return APIResponse.success(
            message=Messages.SUCCESS, data={"user": UserSerializer(request.user).data}
        )

    @extend_schema(
        operation_id="auth_profile_update",
        summary="Update Profile",
        description="Update username, bio or avatar URL.",
        tags=["Authentication"],
        request=UserProfileUpdateSerializer,
        responses={200: UserSerializer, 400: {"description": "Validation errors"}},
    )
    def put(self, request):
        serializer = UserProfileUpdateSerializer(
            request.user, data=request.data, partial=True
        )
        if not serializer.is_valid():
            return APIResponse.validation_error(field_errors=serializer.errors)

        user = AuthenticationService.update_profile(
            request.user, serializer.validated_data
        )
        return APIResponse.updated(
            message=_("Profile updated"), data={"user": UserSerializer(user).data}
        )
