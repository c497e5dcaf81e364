"""JWT token utilities."""

from datetime import datetime, timedelta
from uuid import UUID

import jwt
from pydantic import BaseModel

from conduit.config import AuthSettings
from conduit.util.error import JWTError


class TokenPayload(BaseModel):
    """JWT token payload."""

    id: str
    username: str
    exp: int


def compute_expiry(issued_at: datetime, days: int) -> datetime:
    """Add ``days`` calendar days to the issue date.

    Naive local datetimes are advanced on the calendar, so issuing on
    January 31st with 60 days lands on April 1st (March 31st in a leap
    year) at the same wall-clock time, whatever DST changes happen between.

    Args:
        issued_at: Issue time (naive local time)
        days: Number of calendar days to add

    Returns:
        Expiry time (naive local time)
    """
    return issued_at + timedelta(days=days)


def create_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Username
        settings: Authentication settings
        issued_at: Issue time, defaults to now (local time)

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now()
    expiry = compute_expiry(issued_at, settings.jwt_expiry_days)

    payload = {
        "id": user_id,
        "username": username,
        "exp": int(expiry.timestamp()),
    }

    return jwt.encode(
        payload,
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, malformed or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "id", "username"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        user_id = UUID(str(payload["id"]))
    except ValueError:
        raise JWTError("Invalid token subject")

    return TokenPayload(
        id=str(user_id),
        username=str(payload["username"]),
        exp=int(payload["exp"]),
    )
