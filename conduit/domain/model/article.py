"""Article aggregate root."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, CommentId, Slug, UserId


class Article(DomainModel):
    """Article aggregate root.

    ``favorites_count`` is a cache of how many users hold this article in
    their favorites. It is only ever overwritten by a recount, never
    incremented or decremented.
    """

    id: ArticleId
    slug: Slug
    title: str = Field(min_length=1)
    description: str = ""
    body: str = ""
    tag_list: list[str] = Field(default_factory=list)
    favorites_count: int = Field(default=0, ge=0)
    author_id: UserId
    comment_ids: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
