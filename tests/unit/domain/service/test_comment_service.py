"""Unit tests for CommentService."""

from datetime import datetime, timedelta

import pytest

from conduit.domain.error import NotFoundError
from conduit.domain.service import CommentService
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
)
from tests.factories import make_article, make_comment, make_user


@pytest.fixture
def repos():
    return InMemoryCommentRepository(), InMemoryArticleRepository()


class TestAddComment:
    """Tests for CommentService.add_comment()."""

    @pytest.mark.asyncio
    async def test_appends_to_article(self, repos):
        comment_repo, article_repo = repos
        service = CommentService(comment_repo, article_repo)
        author = make_user("jake")
        article = await article_repo.save(make_article(author))

        comment = await service.add_comment(article, author.id, "Nice!")

        stored = await article_repo.find_by_id(article.id)
        assert stored.comment_ids == [comment.id]
        assert comment.article_id == article.id
        assert await comment_repo.find_by_id(comment.id) == comment


class TestListForArticle:
    """Tests for CommentService.list_for_article()."""

    @pytest.mark.asyncio
    async def test_newest_first(self, repos):
        comment_repo, article_repo = repos
        service = CommentService(comment_repo, article_repo)
        author = make_user("jake")
        article = make_article(author)
        now = datetime.now()
        older = await comment_repo.save(
            make_comment(author, article, body="first", created_at=now)
        )
        newer = await comment_repo.save(
            make_comment(
                author, article, body="second", created_at=now + timedelta(seconds=1)
            )
        )
        article = await article_repo.save(
            article.model_copy(update={"comment_ids": [older.id, newer.id]})
        )

        comments = await service.list_for_article(article)

        assert [c.body for c in comments] == ["second", "first"]


class TestDeleteComment:
    """Tests for CommentService.delete_comment()."""

    @pytest.mark.asyncio
    async def test_removes_id_from_article(self, repos):
        comment_repo, article_repo = repos
        service = CommentService(comment_repo, article_repo)
        author = make_user("jake")
        article = await article_repo.save(make_article(author))
        keep = await service.add_comment(article, author.id, "keep")
        article = await article_repo.find_by_id(article.id)
        drop = await service.add_comment(article, author.id, "drop")
        article = await article_repo.find_by_id(article.id)

        article = await service.delete_comment(article, drop)

        assert article.comment_ids == [keep.id]
        assert await comment_repo.find_by_id(drop.id) is None

    @pytest.mark.asyncio
    async def test_get_comment_with_malformed_id(self, repos):
        service = CommentService(*repos)
        article = make_article(make_user("jake"))

        with pytest.raises(NotFoundError):
            await service.get_comment(article, "not-a-uuid")
