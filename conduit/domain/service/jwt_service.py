"""JWT token domain service."""

from datetime import datetime

import logfire

from conduit.config import AuthSettings
from conduit.domain.error import InvalidTokenError
from conduit.util.error import JWTError
from conduit.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for issuing and parsing identity tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings holding the signing secret
        """
        self.auth_settings = auth_settings

    def issue(
        self, user_id: str, username: str, issued_at: datetime | None = None
    ) -> str:
        """Issue a signed token for a user.

        Args:
            user_id: User ID
            username: Username
            issued_at: Issue time, defaults to now

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.issue", user_id=user_id, username=username):
            token = create_token(user_id, username, self.auth_settings, issued_at)
            logfire.info("JWT token issued", user_id=user_id, username=username)
            return token

    def parse(self, token: str) -> TokenPayload:
        """Verify a token and extract its claims.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            InvalidTokenError: If the signature is wrong, the token is
                malformed or it has expired
        """
        with logfire.span("jwt_service.parse"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token rejected", error=str(e))
                raise InvalidTokenError(str(e)) from e

            logfire.info(
                "JWT token verified", user_id=payload.id, username=payload.username
            )
            return payload
