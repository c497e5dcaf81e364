"""Create article use case."""

import logfire
from pydantic import BaseModel, Field

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    ArticleInfo,
    load_actor,
    require_text,
    to_article_info,
)
from conduit.domain.service import ArticleService, UserService


class CreateArticleRequest(BaseModel):
    """Create article request."""

    user_id: str  # Author, from the verified token
    title: str | None = None
    description: str = ""
    body: str = ""
    tag_list: list[str] = Field(default_factory=list)


class CreateArticleResponse(CamelModel):
    """Create article response."""

    article: ArticleInfo


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing a new article."""

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize create article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute create article flow.

        Steps:
        1. Load the author
        2. Generate a slug from the title and save the article
        3. Render it for the author

        Raises:
            InvalidTokenError: If the author no longer exists
            ValidationError: If the title is blank
            DuplicateUniqueError: If the generated slug collides
        """
        author = await load_actor(self.user_service, request.user_id)
        title = require_text("title", request.title)

        with logfire.span("create_article.execute", author_id=request.user_id):
            article = await self.article_service.create_article(
                author_id=author.id,
                title=title,
                description=request.description,
                body=request.body,
                tag_list=request.tag_list,
            )
            return CreateArticleResponse(
                article=to_article_info(article, author, author)
            )
