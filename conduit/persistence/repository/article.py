"""PostgreSQL implementation of Article repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.error import DuplicateUniqueError
from conduit.domain.model import Article
from conduit.domain.repository import ArticleFilter, ArticleRepository
from conduit.domain.value import ArticleId, Slug
from conduit.persistence.mappers import article_to_dict, row_to_article
from conduit.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filter(stmt, article_filter: ArticleFilter):
        if article_filter.tag is not None:
            stmt = stmt.where(articles_table.c.tag_list.contains([article_filter.tag]))
        if article_filter.author_ids is not None:
            stmt = stmt.where(
                articles_table.c.author_id.in_(list(article_filter.author_ids))
            )
        if article_filter.article_ids is not None:
            stmt = stmt.where(articles_table.c.id.in_(list(article_filter.article_ids)))
        return stmt

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_article(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        with logfire.span("article_repository.find_by_slug", slug=str(slug)):
            stmt = select(articles_table).where(articles_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_article(dict(row)) if row else None

    async def find_all(
        self,
        article_filter: ArticleFilter,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        """Find articles, newest first, with filtering and pagination."""
        with logfire.span(
            "article_repository.find_all",
            tag=article_filter.tag,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(articles_table), article_filter)
            stmt = (
                stmt.order_by(articles_table.c.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_article(dict(row)) for row in result.mappings().all()]

    async def count(self, article_filter: ArticleFilter) -> int:
        """Count articles matching the criteria."""
        stmt = self._apply_filter(
            select(func.count()).select_from(articles_table), article_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Raises:
            DuplicateUniqueError: If the slug is taken by another article
        """
        existing = await self.find_by_id(article.id)

        article_dict = article_to_dict(article)

        if existing:
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn("Slug collision", slug=str(article.slug))
            raise DuplicateUniqueError("slug") from e

        return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article."""
        stmt = delete(articles_table).where(articles_table.c.id == article_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def distinct_tags(self) -> list[str]:
        """List every distinct tag, sorted."""
        tags = select(func.unnest(articles_table.c.tag_list).label("tag")).subquery()
        stmt = select(tags.c.tag).distinct().order_by(tags.c.tag)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
