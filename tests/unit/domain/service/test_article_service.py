"""Unit tests for ArticleService."""

import re
from datetime import datetime, timedelta

import pytest

from conduit.domain.error import NotFoundError
from conduit.domain.repository import ArticleFilter
from conduit.domain.service import ArticleService, SlugGenerator
from conduit.persistence.repository.inmemory import InMemoryArticleRepository
from tests.factories import make_article, make_user


@pytest.fixture
def repo() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def service(repo) -> ArticleService:
    return ArticleService(repo, SlugGenerator())


class TestCreateArticle:
    """Tests for ArticleService.create_article()."""

    @pytest.mark.asyncio
    async def test_create_generates_slug(self, service, repo):
        author = make_user("jake")

        article = await service.create_article(
            author_id=author.id,
            title="How to train your dragon",
            description="Ever wonder how?",
            body="You have to believe",
            tag_list=["dragons", "training"],
        )

        assert re.fullmatch(r"how-to-train-your-dragon-[0-9a-z]{6}", str(article.slug))
        assert article.favorites_count == 0
        assert article.comment_ids == []
        assert await repo.find_by_slug(article.slug) == article


class TestGetBySlug:
    """Tests for ArticleService.get_by_slug()."""

    @pytest.mark.asyncio
    async def test_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.get_by_slug("no-such-article")

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.get_by_slug("Not A Slug")


class TestUpdateArticle:
    """Tests for ArticleService.update_article()."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change_and_slug_stays(self, service, repo):
        article = await repo.save(make_article(make_user("jake")))

        updated = await service.update_article(article, title="A new title")

        assert updated.title == "A new title"
        assert updated.slug == article.slug
        assert updated.body == article.body
        assert updated.updated_at >= article.updated_at


class TestListArticles:
    """Tests for ArticleService.list_articles() and list_tags()."""

    @pytest.mark.asyncio
    async def test_newest_first_with_count(self, service, repo):
        author = make_user("jake")
        now = datetime.now()
        for i in range(3):
            await repo.save(
                make_article(
                    author,
                    slug=f"article-{i}",
                    created_at=now + timedelta(minutes=i),
                )
            )

        articles, count = await service.list_articles(
            ArticleFilter(), limit=2, offset=0
        )

        assert count == 3
        assert [str(a.slug) for a in articles] == ["article-2", "article-1"]

    @pytest.mark.asyncio
    async def test_filter_by_tag_and_author(self, service, repo):
        jake = make_user("jake")
        anna = make_user("anna")
        await repo.save(make_article(jake, slug="a", tag_list=["dragons"]))
        await repo.save(make_article(jake, slug="b", tag_list=["cats"]))
        await repo.save(make_article(anna, slug="c", tag_list=["dragons"]))

        articles, count = await service.list_articles(
            ArticleFilter(tag="dragons", author_ids=[jake.id]), limit=20, offset=0
        )

        assert count == 1
        assert str(articles[0].slug) == "a"

    @pytest.mark.asyncio
    async def test_empty_id_filter_matches_nothing(self, service, repo):
        await repo.save(make_article(make_user("jake")))

        articles, count = await service.list_articles(
            ArticleFilter(author_ids=[]), limit=20, offset=0
        )

        assert articles == []
        assert count == 0

    @pytest.mark.asyncio
    async def test_distinct_sorted_tags(self, service, repo):
        jake = make_user("jake")
        await repo.save(make_article(jake, slug="a", tag_list=["dragons", "angular"]))
        await repo.save(make_article(jake, slug="b", tag_list=["dragons"]))

        assert await service.list_tags() == ["angular", "dragons"]
