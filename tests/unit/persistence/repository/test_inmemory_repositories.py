"""Unit tests for the in-memory repositories used by the test container."""

import pytest

from conduit.domain.error import DuplicateUniqueError
from conduit.domain.repository import ArticleFilter
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryUserRepository,
)
from tests.factories import make_article, make_user


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_unique_username(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("jake"))

        with pytest.raises(DuplicateUniqueError):
            await repo.save(make_user("jake"))

    @pytest.mark.asyncio
    async def test_count_favorited_by(self):
        repo = InMemoryUserRepository()
        article = make_article(make_user("jake"))
        await repo.save(make_user("anna", favorites=[article.id]))
        await repo.save(make_user("bob", favorites=[article.id]))
        await repo.save(make_user("carl"))

        assert await repo.count_favorited_by(article.id) == 2


class TestInMemoryArticleRepository:
    """Tests for InMemoryArticleRepository."""

    @pytest.mark.asyncio
    async def test_unique_slug(self):
        repo = InMemoryArticleRepository()
        author = make_user("jake")
        await repo.save(make_article(author, slug="same"))

        with pytest.raises(DuplicateUniqueError) as exc_info:
            await repo.save(make_article(author, slug="same"))

        assert exc_info.value.field == "slug"

    @pytest.mark.asyncio
    async def test_filter_by_article_ids(self):
        repo = InMemoryArticleRepository()
        author = make_user("jake")
        wanted = await repo.save(make_article(author, slug="wanted"))
        await repo.save(make_article(author, slug="other"))

        found = await repo.find_all(ArticleFilter(article_ids=[wanted.id]))

        assert found == [wanted]
