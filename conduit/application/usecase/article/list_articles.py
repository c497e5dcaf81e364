"""List articles use case."""

import logfire
from pydantic import BaseModel, Field

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    ArticleInfo,
    load_viewer,
    to_article_infos,
)
from conduit.domain.repository import ArticleFilter
from conduit.domain.service import ArticleService, UserService


class ListArticlesRequest(BaseModel):
    """List articles request."""

    tag: str | None = None
    author: str | None = None  # Author username
    favorited: str | None = None  # Username whose favorites to list
    limit: int = Field(default=20, ge=0)
    offset: int = Field(default=0, ge=0)
    viewer_id: str | None = None


class ListArticlesResponse(CamelModel):
    """A page of articles plus the total for the filter."""

    articles: list[ArticleInfo]
    articles_count: int


class ListArticlesUseCase(BaseUseCase):
    """Use case for listing articles, newest first."""

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize list articles use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        Filters combine with AND. An unknown ``author`` or ``favorited``
        username matches no articles rather than failing.

        Args:
            request: Filters and pagination

        Returns:
            The page and the total number of matching articles
        """
        with logfire.span(
            "list_articles.execute",
            tag=request.tag,
            author=request.author,
            favorited=request.favorited,
        ):
            article_filter = await self._build_filter(request)
            articles, count = await self.article_service.list_articles(
                article_filter, limit=request.limit, offset=request.offset
            )

            viewer = await load_viewer(self.user_service, request.viewer_id)
            return ListArticlesResponse(
                articles=await to_article_infos(self.user_service, articles, viewer),
                articles_count=count,
            )

    async def _build_filter(self, request: ListArticlesRequest) -> ArticleFilter:
        author_ids = None
        if request.author is not None:
            author = await self.user_service.find_by_username(request.author)
            author_ids = [author.id] if author else []

        article_ids = None
        if request.favorited is not None:
            fan = await self.user_service.find_by_username(request.favorited)
            article_ids = list(fan.favorites) if fan else []

        return ArticleFilter(
            tag=request.tag, author_ids=author_ids, article_ids=article_ids
        )
