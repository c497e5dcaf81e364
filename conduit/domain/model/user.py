"""User aggregate root.

Users register with a username, email and password, follow other users
and favorite articles.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, Email, UserId, Username

DEFAULT_IMAGE_URL = "https://static.productionready.io/images/smiley-cyrus.jpg"


class User(DomainModel):
    """User aggregate root.

    ``following`` and ``favorites`` hold ids only and never contain the same
    id twice. Password material is the salt/hash pair; the plaintext is
    never stored.
    """

    id: UserId
    username: Username
    email: Email
    password_salt: Optional[str] = None
    password_hash: Optional[str] = None
    bio: Optional[str] = None
    image: str = DEFAULT_IMAGE_URL
    following: list[UserId] = Field(default_factory=list)
    favorites: list[ArticleId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
