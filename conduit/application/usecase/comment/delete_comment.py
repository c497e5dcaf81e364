"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.usecase.common import load_actor
from conduit.domain.error import NotFoundError
from conduit.domain.service import (
    ArticleService,
    CommentService,
    UserService,
    ensure_can_delete_comment,
)


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    user_id: str  # Acting user, from the verified token
    slug: str
    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment. Only its author may delete it."""

    def __init__(
        self,
        user_service: UserService,
        article_service: ArticleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.user_service = user_service
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        The comment id is removed from the article's ``comment_ids`` before
        the comment itself is deleted.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the article or comment doesn't exist, or the
                comment belongs to another article
            ForbiddenError: If the acting user isn't the comment's author
        """
        actor = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)
        comment = await self.comment_service.get_comment(article, request.comment_id)

        if str(comment.article_id) != str(article.id):
            logfire.warn(
                "Comment addressed under the wrong article",
                comment_id=request.comment_id,
                slug=request.slug,
            )
            raise NotFoundError("Comment", request.comment_id)

        ensure_can_delete_comment(comment, actor.id)
        await self.comment_service.delete_comment(article, comment)
