"""Article repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from conduit.domain.model.article import Article
from conduit.domain.value import ArticleId, Slug, UserId


@dataclass(frozen=True)
class ArticleFilter:
    """Criteria for article listings.

    ``None`` means "don't filter on this field". An empty sequence for
    ``author_ids`` or ``article_ids`` matches nothing.
    """

    tag: Optional[str] = None
    author_ids: Optional[Sequence[UserId]] = None
    article_ids: Optional[Sequence[ArticleId]] = None


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        article_filter: ArticleFilter,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        """Find articles, newest first, with filtering and pagination.

        Args:
            article_filter: Listing criteria
            limit: Maximum number of articles to return
            offset: Number of articles to skip

        Returns:
            Articles matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, article_filter: ArticleFilter) -> int:
        """Count articles matching the criteria.

        Args:
            article_filter: Listing criteria

        Returns:
            Total number of matching articles
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article

        Raises:
            DuplicateUniqueError: If the slug is taken by another article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article (hard delete).

        Comments and favorites referencing it are left untouched.

        Args:
            article_id: The article ID to delete
        """
        pass

    @abstractmethod
    async def distinct_tags(self) -> list[str]:
        """List every distinct tag used by any article.

        Returns:
            Tags, sorted alphabetically
        """
        pass
