"""List comments use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    CommentInfo,
    load_viewer,
    to_comment_info,
)
from conduit.domain.service import ArticleService, CommentService, UserService


class ListCommentsRequest(BaseModel):
    """List comments request."""

    slug: str
    viewer_id: str | None = None


class ListCommentsResponse(CamelModel):
    """List comments response."""

    comments: list[CommentInfo]


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading an article's comments, newest first."""

    def __init__(
        self,
        user_service: UserService,
        article_service: ArticleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.user_service = user_service
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Comments whose author can't be found are left out.

        Raises:
            NotFoundError: If the article doesn't exist
        """
        article = await self.article_service.get_by_slug(request.slug)
        comments = await self.comment_service.list_for_article(article)

        viewer = await load_viewer(self.user_service, request.viewer_id)
        authors = await self.user_service.find_by_ids([c.author_id for c in comments])

        rendered = []
        for comment in comments:
            author = authors.get(str(comment.author_id))
            if author is None:
                logfire.warn("Comment author missing", comment_id=str(comment.id))
                continue
            rendered.append(to_comment_info(comment, author, viewer))

        return ListCommentsResponse(comments=rendered)
