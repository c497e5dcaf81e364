"""Favorite and unfavorite use cases."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    ArticleInfo,
    load_actor,
    to_article_info,
)
from conduit.domain.service import ArticleService, FavoriteService, UserService


class FavoriteArticleRequest(BaseModel):
    """Favorite or unfavorite request."""

    user_id: str  # Acting user, from the verified token
    slug: str


class FavoriteArticleResponse(CamelModel):
    """Article with its recounted favorites."""

    article: ArticleInfo


class FavoriteArticleUseCase(BaseUseCase):
    """Use case for favoriting an article. Favoriting twice is a no-op."""

    def __init__(
        self,
        user_service: UserService,
        article_service: ArticleService,
        favorite_service: FavoriteService,
    ) -> None:
        """Initialize favorite article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
            favorite_service: Favorites ledger
        """
        self.user_service = user_service
        self.article_service = article_service
        self.favorite_service = favorite_service

    async def execute(self, request: FavoriteArticleRequest) -> FavoriteArticleResponse:
        """Execute favorite flow.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the article or its author doesn't exist
        """
        actor = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)

        actor, article = await self.favorite_service.favorite_article(actor, article)
        author = await self.user_service.get_by_id(article.author_id)
        return FavoriteArticleResponse(
            article=to_article_info(article, author, actor)
        )


class UnfavoriteArticleUseCase(BaseUseCase):
    """Use case for removing an article from favorites."""

    def __init__(
        self,
        user_service: UserService,
        article_service: ArticleService,
        favorite_service: FavoriteService,
    ) -> None:
        """Initialize unfavorite article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
            favorite_service: Favorites ledger
        """
        self.user_service = user_service
        self.article_service = article_service
        self.favorite_service = favorite_service

    async def execute(self, request: FavoriteArticleRequest) -> FavoriteArticleResponse:
        """Execute unfavorite flow.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the article or its author doesn't exist
        """
        actor = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)

        actor, article = await self.favorite_service.unfavorite_article(
            actor, article
        )
        author = await self.user_service.get_by_id(article.author_id)
        return FavoriteArticleResponse(
            article=to_article_info(article, author, actor)
        )
