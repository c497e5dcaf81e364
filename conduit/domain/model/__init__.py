"""Domain model entities for Conduit."""

from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.model.user import DEFAULT_IMAGE_URL, User

__all__ = [
    "User",
    "Article",
    "Comment",
    "DEFAULT_IMAGE_URL",
]
