"""
JWT authentication that honours logout.
"""

import logging

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken

logger = logging.getLogger(__name__)


class BlacklistJWTAuthentication(JWTAuthentication):
    """
    Bearer-token authentication that rejects revoked access tokens.

    Logging out records the access token's ``jti`` in the simplejwt
    blacklist next to the refresh token, so the access token stops working
    immediately instead of at expiry.
    """

    def get_validated_token(self, raw_token):
        validated_token = super().get_validated_token(raw_token)

        jti = validated_token.get("jti")
        if jti and BlacklistedToken.objects.filter(token__jti=jti).exists():
            logger.info(f"Rejected revoked access token {jti}")
            raise InvalidToken("Token has been revoked")

        return validated_token
