"""Feed articles use case."""

from pydantic import BaseModel, Field

from conduit.application.usecase.article.list_articles import ListArticlesResponse
from conduit.application.usecase.base import BaseUseCase
from conduit.application.usecase.common import load_actor, to_article_infos
from conduit.domain.repository import ArticleFilter
from conduit.domain.service import ArticleService, UserService


class FeedArticlesRequest(BaseModel):
    """Feed request."""

    user_id: str  # Reader, from the verified token
    limit: int = Field(default=10, ge=0)
    offset: int = Field(default=0, ge=0)


class FeedArticlesUseCase(BaseUseCase):
    """Use case for the reader's feed: articles by users they follow."""

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize feed articles use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: FeedArticlesRequest) -> ListArticlesResponse:
        """Execute feed flow.

        Raises:
            InvalidTokenError: If the reader no longer exists
        """
        reader = await load_actor(self.user_service, request.user_id)
        article_filter = ArticleFilter(author_ids=list(reader.following))

        articles, count = await self.article_service.list_articles(
            article_filter, limit=request.limit, offset=request.offset
        )
        return ListArticlesResponse(
            articles=await to_article_infos(self.user_service, articles, reader),
            articles_count=count,
        )
