"""Get article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    ArticleInfo,
    load_viewer,
    to_article_info,
)
from conduit.domain.service import ArticleService, UserService


class GetArticleRequest(BaseModel):
    """Get article request."""

    slug: str
    viewer_id: str | None = None


class GetArticleResponse(CamelModel):
    """Get article response."""

    article: ArticleInfo


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one article by slug."""

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize get article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Raises:
            NotFoundError: If the slug or its author doesn't exist
        """
        article = await self.article_service.get_by_slug(request.slug)
        author = await self.user_service.get_by_id(article.author_id)
        viewer = await load_viewer(self.user_service, request.viewer_id)
        return GetArticleResponse(article=to_article_info(article, author, viewer))
