"""Response shapes and helpers shared by several use cases."""

from datetime import datetime
from typing import Optional, TypeVar
from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import InvalidTokenError, ValidationError
from conduit.domain.model import Article, Comment, User
from conduit.domain.service import FavoriteService, SocialGraphService, UserService
from conduit.domain.value import UserId
from conduit.domain.value.common import RootValueObject

from .base import CamelModel

V = TypeVar("V", bound=RootValueObject)


class UserInfo(CamelModel):
    """Authenticated user as returned to its owner."""

    username: str
    email: str
    token: str
    bio: Optional[str]
    image: str


class ProfileInfo(CamelModel):
    """Public view of a user, relative to the viewer."""

    username: str
    bio: Optional[str]
    image: str
    following: bool


class ArticleInfo(CamelModel):
    """Article as seen by the viewer."""

    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str]
    created_at: datetime
    updated_at: datetime
    favorited: bool
    favorites_count: int
    author: ProfileInfo


class CommentInfo(CamelModel):
    """Comment as seen by the viewer."""

    id: str
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileInfo


def parse_value(value_type: type[V], field: str, raw: object) -> V:
    """Build a value object, turning pydantic errors into a field error.

    Args:
        value_type: Value object class (``Username``, ``Email``, ...)
        field: Field name reported to the client
        raw: Untrusted input

    Returns:
        The validated value object

    Raises:
        ValidationError: If the input is rejected
    """
    try:
        return value_type(raw)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(field, message) from e


def require_text(field: str, value: Optional[str]) -> str:
    """Reject missing or whitespace-only text.

    Raises:
        ValidationError: If the value is blank
    """
    if value is None or not value.strip():
        raise ValidationError(field, "can't be blank")
    return value


async def load_actor(user_service: UserService, user_id: str) -> User:
    """Load the user behind a verified token.

    A token for a user that no longer exists can't authenticate anyone.

    Raises:
        InvalidTokenError: If the user is gone
    """
    user = await user_service.find_by_id(UserId(UUID(user_id)))
    if user is None:
        logfire.warn("Token subject no longer exists", user_id=user_id)
        raise InvalidTokenError("User no longer exists")
    return user


async def load_viewer(
    user_service: UserService, viewer_id: Optional[str]
) -> Optional[User]:
    """Load the optional viewer; a vanished user is treated as anonymous."""
    if viewer_id is None:
        return None
    return await user_service.find_by_id(UserId(UUID(viewer_id)))


def to_user_info(user: User, token: str) -> UserInfo:
    return UserInfo(
        username=str(user.username),
        email=str(user.email),
        token=token,
        bio=user.bio,
        image=user.image,
    )


def to_profile(user: User, viewer: Optional[User]) -> ProfileInfo:
    return ProfileInfo(
        username=str(user.username),
        bio=user.bio,
        image=user.image,
        following=SocialGraphService.is_following(viewer, user.id),
    )


def to_article_info(
    article: Article, author: User, viewer: Optional[User]
) -> ArticleInfo:
    return ArticleInfo(
        slug=str(article.slug),
        title=article.title,
        description=article.description,
        body=article.body,
        tag_list=list(article.tag_list),
        created_at=article.created_at,
        updated_at=article.updated_at,
        favorited=FavoriteService.is_favorite(viewer, article.id),
        favorites_count=article.favorites_count,
        author=to_profile(author, viewer),
    )


def to_comment_info(
    comment: Comment, author: User, viewer: Optional[User]
) -> CommentInfo:
    return CommentInfo(
        id=str(comment.id),
        body=comment.body,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        author=to_profile(author, viewer),
    )


async def to_article_infos(
    user_service: UserService, articles: list[Article], viewer: Optional[User]
) -> list[ArticleInfo]:
    """Render several articles, loading all authors in one lookup.

    Articles whose author can't be found are left out.
    """
    authors = await user_service.find_by_ids([a.author_id for a in articles])
    rendered = []
    for article in articles:
        author = authors.get(str(article.author_id))
        if author is None:
            logfire.warn(
                "Article author missing",
                article_id=str(article.id),
                author_id=str(article.author_id),
            )
            continue
        rendered.append(to_article_info(article, author, viewer))
    return rendered
