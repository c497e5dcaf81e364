"""In-memory article repository for testing."""

from typing import Optional

from conduit.domain.error import DuplicateUniqueError
from conduit.domain.model.article import Article
from conduit.domain.repository.article import ArticleFilter, ArticleRepository
from conduit.domain.value import ArticleId, Slug


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[str, Article] = {}

    def _matching(self, article_filter: ArticleFilter) -> list[Article]:
        articles = list(self._articles.values())

        if article_filter.tag is not None:
            articles = [a for a in articles if article_filter.tag in a.tag_list]
        if article_filter.author_ids is not None:
            authors = {str(a) for a in article_filter.author_ids}
            articles = [a for a in articles if str(a.author_id) in authors]
        if article_filter.article_ids is not None:
            ids = {str(a) for a in article_filter.article_ids}
            articles = [a for a in articles if str(a.id) in ids]

        return sorted(articles, key=lambda a: a.created_at, reverse=True)

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(str(article_id))

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._articles.values():
            if article.slug == slug:
                return article
        return None

    async def find_all(
        self,
        article_filter: ArticleFilter,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        """Find articles, newest first."""
        return self._matching(article_filter)[offset : offset + limit]

    async def count(self, article_filter: ArticleFilter) -> int:
        """Count articles matching the criteria."""
        return len(self._matching(article_filter))

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        for key, other in self._articles.items():
            if key != str(article.id) and other.slug == article.slug:
                raise DuplicateUniqueError("slug")

        self._articles[str(article.id)] = article
        return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article."""
        self._articles.pop(str(article_id), None)

    async def distinct_tags(self) -> list[str]:
        """List every distinct tag, sorted."""
        return sorted({tag for a in self._articles.values() for tag in a.tag_list})
