"""Inbound token resolution.

Turns the raw ``Authorization`` header value into an identity. Two modes:

- ``require``: no token or a bad token is an error.
- ``optional``: no token means anonymous (``None``); a bad token is still
  an error, it is never downgraded to anonymous.
"""

import logfire

from conduit.domain.error import MissingTokenError
from conduit.util.jwt import TokenPayload

from .base import Service
from .jwt_service import JWTService

TOKEN_SCHEME = "Token"


class IdentityResolver(Service):
    """Resolves identities from ``Authorization: Token <jwt>`` headers."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize identity resolver.

        Args:
            jwt_service: JWT domain service used to validate tokens
        """
        self.jwt_service = jwt_service

    @staticmethod
    def extract_token(authorization: str | None) -> str | None:
        """Pull the token out of a header value.

        The value must be exactly two parts separated by one space, the first
        being ``Token``. Any other shape counts as no token.

        Args:
            authorization: Raw header value, if any

        Returns:
            The token, or None
        """
        if not authorization:
            return None

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != TOKEN_SCHEME:
            return None

        return parts[1]

    def require(self, authorization: str | None) -> TokenPayload:
        """Resolve an identity that must be present.

        Args:
            authorization: Raw header value, if any

        Returns:
            Claims of the verified token

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token fails verification
        """
        token = self.extract_token(authorization)
        if token is None:
            logfire.info("Required identity missing")
            raise MissingTokenError()

        return self.jwt_service.parse(token)

    def optional(self, authorization: str | None) -> TokenPayload | None:
        """Resolve an identity that may be absent.

        Args:
            authorization: Raw header value, if any

        Returns:
            Claims of the verified token, or None for anonymous requests

        Raises:
            InvalidTokenError: If a token was supplied but fails verification
        """
        token = self.extract_token(authorization)
        if token is None:
            return None

        return self.jwt_service.parse(token)
