"""Unit tests for comment use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from conduit.application.usecase.article.create_article import (
    CreateArticleRequest,
    CreateArticleUseCase,
)
from conduit.application.usecase.comment.add_comment import (
    AddCommentRequest,
    AddCommentUseCase,
)
from conduit.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from conduit.application.usecase.comment.list_comments import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from conduit.domain.error import ForbiddenError, NotFoundError, ValidationError
from conduit.domain.service import ArticleService
from tests.factories import register
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create(container: AsyncContainer, user_id: str, title: str) -> str:
    use_case = await container.get(CreateArticleUseCase)
    response = await use_case.execute(
        CreateArticleRequest(user_id=user_id, title=title)
    )
    return response.article.slug


async def comment(container: AsyncContainer, user_id: str, slug: str, body: str):
    use_case = await container.get(AddCommentUseCase)
    response = await use_case.execute(
        AddCommentRequest(user_id=user_id, slug=slug, body=body)
    )
    return response.comment


class TestAddComment:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_and_list(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        anna_id = await register(unit_env, "anna")
        slug = await create(unit_env, jake_id, "Dragons")
        list_comments = await unit_env.get(ListCommentsUseCase)

        added = await comment(unit_env, anna_id, slug, "Thank you so much!")
        response = await list_comments.execute(ListCommentsRequest(slug=slug))

        assert added.author.username == "anna"
        assert [c.id for c in response.comments] == [added.id]
        assert response.comments[0].body == "Thank you so much!"

    @pytest.mark.asyncio
    async def test_blank_body(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        slug = await create(unit_env, jake_id, "Dragons")
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(AddCommentRequest(user_id=jake_id, slug=slug))

        assert exc_info.value.field == "body"

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")

        with pytest.raises(NotFoundError):
            await comment(unit_env, jake_id, "no-such-article", "hello")


class TestDeleteComment:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        slug = await create(unit_env, jake_id, "Dragons")
        added = await comment(unit_env, jake_id, slug, "First!")
        delete = await unit_env.get(DeleteCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        article_service = await unit_env.get(ArticleService)

        await delete.execute(
            DeleteCommentRequest(user_id=jake_id, slug=slug, comment_id=added.id)
        )

        response = await list_comments.execute(ListCommentsRequest(slug=slug))
        article = await article_service.get_by_slug(slug)
        assert response.comments == []
        assert article.comment_ids == []

    @pytest.mark.asyncio
    async def test_article_author_cannot_delete_others_comment(
        self, unit_env: AsyncContainer
    ):
        jake_id = await register(unit_env, "jake")
        anna_id = await register(unit_env, "anna")
        slug = await create(unit_env, jake_id, "Dragons")
        added = await comment(unit_env, anna_id, slug, "Nice")
        delete = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(ForbiddenError):
            await delete.execute(
                DeleteCommentRequest(user_id=jake_id, slug=slug, comment_id=added.id)
            )

    @pytest.mark.asyncio
    async def test_comment_under_another_article(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        dragons = await create(unit_env, jake_id, "Dragons")
        cats = await create(unit_env, jake_id, "Cats")
        added = await comment(unit_env, jake_id, dragons, "About dragons")
        delete = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteCommentRequest(user_id=jake_id, slug=cats, comment_id=added.id)
            )

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        slug = await create(unit_env, jake_id, "Dragons")
        delete = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteCommentRequest(
                    user_id=jake_id, slug=slug, comment_id=str(uuid4())
                )
            )
