"""Favorites ledger domain service."""

import logfire

from conduit.domain.model.article import Article
from conduit.domain.model.user import User
from conduit.domain.repository import ArticleRepository, UserRepository
from conduit.domain.value import ArticleId

from .base import Service, contains_id


class FavoriteService(Service):
    """Maintains ``User.favorites`` and ``Article.favorites_count``.

    The count is derived data: it is recomputed from the users' favorites
    after every change and never adjusted by +1/-1. Concurrent changes may
    race, but the next recount always converges on the true value.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize favorite service.

        Args:
            user_repository: User repository
            article_repository: Article repository
        """
        self.user_repository = user_repository
        self.article_repository = article_repository

    async def favorite(self, user: User, article_id: ArticleId) -> User:
        """Add the article to the user's favorites if absent.

        Args:
            user: Acting user
            article_id: Article to favorite

        Returns:
            The saved user
        """
        with logfire.span(
            "favorite_service.favorite",
            user_id=str(user.id),
            article_id=str(article_id),
        ):
            if not self.is_favorite(user, article_id):
                user = user.model_copy(
                    update={"favorites": [*user.favorites, article_id]}
                )
            return await self.user_repository.save(user)

    async def unfavorite(self, user: User, article_id: ArticleId) -> User:
        """Remove the article from the user's favorites if present.

        Args:
            user: Acting user
            article_id: Article to unfavorite

        Returns:
            The saved user
        """
        with logfire.span(
            "favorite_service.unfavorite",
            user_id=str(user.id),
            article_id=str(article_id),
        ):
            remaining = [f for f in user.favorites if str(f) != str(article_id)]
            user = user.model_copy(update={"favorites": remaining})
            return await self.user_repository.save(user)

    async def recompute_favorites_count(self, article: Article) -> Article:
        """Overwrite the article's count with a fresh recount and save it.

        Args:
            article: Article to recount

        Returns:
            The saved article
        """
        with logfire.span(
            "favorite_service.recompute_favorites_count", article_id=str(article.id)
        ):
            count = await self.user_repository.count_favorited_by(article.id)
            updated = article.model_copy(update={"favorites_count": count})
            saved = await self.article_repository.save(updated)
            logfire.info(
                "Favorites count recomputed",
                article_id=str(article.id),
                previous=article.favorites_count,
                favorites_count=count,
            )
            return saved

    async def favorite_article(
        self, user: User, article: Article
    ) -> tuple[User, Article]:
        """Favorite an article and refresh its count.

        Args:
            user: Acting user
            article: Article to favorite

        Returns:
            The saved user and the recounted article
        """
        user = await self.favorite(user, article.id)
        article = await self.recompute_favorites_count(article)
        return user, article

    async def unfavorite_article(
        self, user: User, article: Article
    ) -> tuple[User, Article]:
        """Unfavorite an article and refresh its count.

        Args:
            user: Acting user
            article: Article to unfavorite

        Returns:
            The saved user and the recounted article
        """
        user = await self.unfavorite(user, article.id)
        article = await self.recompute_favorites_count(article)
        return user, article

    @staticmethod
    def is_favorite(user: User | None, article_id: ArticleId) -> bool:
        """Check whether the article is in the user's favorites.

        Args:
            user: Viewing user, or None for anonymous
            article_id: Article to check

        Returns:
            True if favorited
        """
        if user is None:
            return False
        return contains_id(user.favorites, article_id)
