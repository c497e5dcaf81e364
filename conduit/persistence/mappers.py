"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from conduit.domain.model import Article, Comment, User
from conduit.domain.value import ArticleId, CommentId, Email, Slug, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_salt=row.get("password_salt"),
        password_hash=row.get("password_hash"),
        bio=row.get("bio"),
        image=row["image"],
        following=[UserId(_uuid(v)) for v in row.get("following") or []],
        favorites=[ArticleId(_uuid(v)) for v in row.get("favorites") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row["description"],
        body=row["body"],
        tag_list=list(row.get("tag_list") or []),
        favorites_count=row["favorites_count"],
        author_id=UserId(_uuid(row["author_id"])),
        comment_ids=[CommentId(_uuid(v)) for v in row.get("comment_ids") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
