"""Update article use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    ArticleInfo,
    load_actor,
    require_text,
    to_article_info,
)
from conduit.domain.service import ArticleService, UserService, ensure_can_modify


class UpdateArticleRequest(BaseModel):
    """Update article request. ``None`` leaves a field unchanged."""

    user_id: str  # Acting user, from the verified token
    slug: str
    title: str | None = None
    description: str | None = None
    body: str | None = None


class UpdateArticleResponse(CamelModel):
    """Update article response."""

    article: ArticleInfo


class UpdateArticleUseCase(BaseUseCase):
    """Use case for editing an article. Only its author may edit it."""

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize update article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: UpdateArticleRequest) -> UpdateArticleResponse:
        """Execute update article flow.

        The slug stays the same even when the title changes.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the article doesn't exist
            ForbiddenError: If the acting user isn't the author
            ValidationError: If a new title is blank
        """
        actor = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)
        ensure_can_modify(article, actor.id)

        title = request.title
        if title is not None:
            title = require_text("title", title)

        with logfire.span("update_article.execute", slug=request.slug):
            article = await self.article_service.update_article(
                article,
                title=title,
                description=request.description,
                body=request.body,
            )
            return UpdateArticleResponse(
                article=to_article_info(article, actor, actor)
            )
