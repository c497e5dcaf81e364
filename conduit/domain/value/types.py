"""Domain value objects for Conduit.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from conduit.domain.value.common import RootValueObject

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class Username(RootValueObject[str]):
    """Public, unique user name.

    Alphanumeric only, stored lowercase.
    Examples: 'jake', 'alice42'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format and normalise case."""
        if not v:
            raise ValueError("can't be blank")
        if not USERNAME_PATTERN.match(v):
            raise ValueError("is invalid")
        return v.lower()


class Email(RootValueObject[str]):
    """User email address, stored lowercase.

    Only a loose ``something@something.something`` shape is enforced.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and normalise case."""
        if not v:
            raise ValueError("can't be blank")
        if not EMAIL_PATTERN.search(v):
            raise ValueError("is invalid")
        return v.lower()


class Slug(RootValueObject[str]):
    """URL-safe slug for articles.

    Lowercase alphanumeric words joined by single hyphens, 1-100 characters.
    Example: 'how-to-train-your-dragon-x7k2p9'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
