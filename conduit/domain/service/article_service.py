"""Article domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from conduit.domain.error import NotFoundError
from conduit.domain.model.article import Article
from conduit.domain.repository import ArticleFilter, ArticleRepository
from conduit.domain.value import ArticleId, Slug, UserId

from .base import Service
from .slug_generator import SlugGenerator


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(
        self, article_repository: ArticleRepository, slug_generator: SlugGenerator
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            slug_generator: Slug generator for new articles
        """
        self.article_repository = article_repository
        self.slug_generator = slug_generator

    async def get_by_slug(self, slug: str) -> Article:
        """Get an article by slug.

        Args:
            slug: Article slug

        Returns:
            Article entity

        Raises:
            NotFoundError: If no article has that slug
        """
        with logfire.span("article_service.get_by_slug", slug=slug):
            try:
                value = Slug(slug)
            except ValueError:
                raise NotFoundError("Article", slug)

            article = await self.article_repository.find_by_slug(value)
            if not article:
                logfire.warn("Article not found by slug", slug=slug)
                raise NotFoundError("Article", slug)
            return article

    async def create_article(
        self,
        author_id: UserId,
        title: str,
        description: str,
        body: str,
        tag_list: list[str],
    ) -> Article:
        """Create and save a new article with a generated slug.

        Args:
            author_id: Author user ID
            title: Article title
            description: Short description
            body: Article body
            tag_list: Tags, in the order given

        Returns:
            Saved article

        Raises:
            DuplicateUniqueError: If the generated slug collides
        """
        with logfire.span(
            "article_service.create_article", author_id=str(author_id), title=title
        ):
            now = datetime.now()
            article = Article(
                id=ArticleId(uuid4()),
                slug=self.slug_generator.generate(title),
                title=title,
                description=description,
                body=body,
                tag_list=tag_list,
                favorites_count=0,
                author_id=author_id,
                comment_ids=[],
                created_at=now,
                updated_at=now,
            )

            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created", article_id=str(saved.id), slug=str(saved.slug)
            )
            return saved

    async def update_article(
        self,
        article: Article,
        title: str | None = None,
        description: str | None = None,
        body: str | None = None,
    ) -> Article:
        """Update the given fields of an article. The slug never changes.

        Args:
            article: Article to update
            title: New title, or None to keep
            description: New description, or None to keep
            body: New body, or None to keep

        Returns:
            Saved article
        """
        with logfire.span("article_service.update_article", slug=str(article.slug)):
            changes: dict[str, object] = {
                field: value
                for field, value in (
                    ("title", title),
                    ("description", description),
                    ("body", body),
                )
                if value is not None
            }
            changes["updated_at"] = datetime.now()

            # model_copy skips validation
            updated = Article.model_validate({**article.model_dump(), **changes})
            saved = await self.article_repository.save(updated)
            logfire.info(
                "Article updated",
                slug=str(saved.slug),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete_article(self, article: Article) -> None:
        """Delete an article.

        Args:
            article: Article to delete
        """
        with logfire.span("article_service.delete_article", slug=str(article.slug)):
            await self.article_repository.delete(article.id)
            logfire.info("Article deleted", article_id=str(article.id))

    async def list_articles(
        self, article_filter: ArticleFilter, limit: int, offset: int
    ) -> tuple[list[Article], int]:
        """List a page of articles plus the total count for the filter.

        Args:
            article_filter: Listing criteria
            limit: Page size
            offset: Number of articles to skip

        Returns:
            Page of articles (newest first) and total matching count
        """
        with logfire.span(
            "article_service.list_articles",
            tag=article_filter.tag,
            limit=limit,
            offset=offset,
        ):
            articles = await self.article_repository.find_all(
                article_filter, limit=limit, offset=offset
            )
            count = await self.article_repository.count(article_filter)
            logfire.info("Articles listed", returned=len(articles), total=count)
            return articles, count

    async def list_tags(self) -> list[str]:
        """List the distinct tags used across all articles.

        Returns:
            Sorted tag names
        """
        with logfire.span("article_service.list_tags"):
            return await self.article_repository.distinct_tags()
