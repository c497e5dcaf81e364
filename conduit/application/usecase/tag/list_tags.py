"""List tags use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.domain.service import ArticleService


class ListTagsRequest(BaseModel):
    """List tags request."""


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing every tag in use."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize list tags use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Distinct tags across all articles, sorted
        """
        with logfire.span("list_tags.execute"):
            tags = await self.article_service.list_tags()
            logfire.info("Tags listed", count=len(tags))
            return ListTagsResponse(tags=tags)
