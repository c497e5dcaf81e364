"""Ownership checks gating edits and deletions."""

from uuid import UUID

from conduit.domain.error import ForbiddenError
from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment


def can_modify(article: Article, user_id: UUID | str) -> bool:
    """True iff the user wrote the article."""
    return str(article.author_id) == str(user_id)


def can_delete_comment(comment: Comment, user_id: UUID | str) -> bool:
    """True iff the user wrote the comment."""
    return str(comment.author_id) == str(user_id)


def ensure_can_modify(article: Article, user_id: UUID | str) -> None:
    """Raise ForbiddenError unless the user wrote the article."""
    if not can_modify(article, user_id):
        raise ForbiddenError("article", str(article.slug), str(user_id))


def ensure_can_delete_comment(comment: Comment, user_id: UUID | str) -> None:
    """Raise ForbiddenError unless the user wrote the comment."""
    if not can_delete_comment(comment, user_id):
        raise ForbiddenError("comment", str(comment.id), str(user_id))
