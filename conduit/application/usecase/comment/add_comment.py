"""Add comment use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    CommentInfo,
    load_actor,
    require_text,
    to_comment_info,
)
from conduit.domain.service import ArticleService, CommentService, UserService


class AddCommentRequest(BaseModel):
    """Add comment request."""

    user_id: str  # Author, from the verified token
    slug: str
    body: str | None = None


class AddCommentResponse(CamelModel):
    """Add comment response."""

    comment: CommentInfo


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on an article."""

    def __init__(
        self,
        user_service: UserService,
        article_service: ArticleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.user_service = user_service
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            InvalidTokenError: If the author no longer exists
            NotFoundError: If the article doesn't exist
            ValidationError: If the body is blank
        """
        author = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)
        body = require_text("body", request.body)

        with logfire.span("add_comment.execute", slug=request.slug):
            comment = await self.comment_service.add_comment(article, author.id, body)
            return AddCommentResponse(comment=to_comment_info(comment, author, author))
