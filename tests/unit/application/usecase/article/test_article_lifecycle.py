"""Unit tests for creating, reading, updating, deleting and favoriting articles."""

from dishka import AsyncContainer
import pytest

from conduit.application.usecase.article.create_article import (
    CreateArticleRequest,
    CreateArticleUseCase,
)
from conduit.application.usecase.article.delete_article import (
    DeleteArticleRequest,
    DeleteArticleUseCase,
)
from conduit.application.usecase.article.favorite_article import (
    FavoriteArticleRequest,
    FavoriteArticleUseCase,
    UnfavoriteArticleUseCase,
)
from conduit.application.usecase.article.get_article import (
    GetArticleRequest,
    GetArticleUseCase,
)
from conduit.application.usecase.article.update_article import (
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from conduit.domain.error import ForbiddenError, NotFoundError, ValidationError
from tests.factories import register
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create(container: AsyncContainer, user_id: str, title: str = "Dragons"):
    use_case = await container.get(CreateArticleUseCase)
    response = await use_case.execute(
        CreateArticleRequest(
            user_id=user_id,
            title=title,
            description="Ever wonder how?",
            body="You have to believe",
            tag_list=["dragons", "training"],
        )
    )
    return response.article


class TestCreateArticle:
    """Tests for CreateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_create(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")

        article = await create(unit_env, jake_id, title="How to train your dragon")

        assert article.slug.startswith("how-to-train-your-dragon-")
        assert article.tag_list == ["dragons", "training"]
        assert article.favorited is False
        assert article.favorites_count == 0
        assert article.author.username == "jake"
        assert article.author.following is False

    @pytest.mark.asyncio
    async def test_blank_title(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        use_case = await unit_env.get(CreateArticleUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreateArticleRequest(user_id=jake_id, title=" "))

        assert exc_info.value.field == "title"

    @pytest.mark.asyncio
    async def test_camel_case_dump(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")

        dumped = (await create(unit_env, jake_id)).model_dump(by_alias=True)

        assert {"tagList", "createdAt", "updatedAt", "favoritesCount"} <= set(dumped)


class TestUpdateArticle:
    """Tests for UpdateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_and_slug_stays(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        article = await create(unit_env, jake_id)
        use_case = await unit_env.get(UpdateArticleUseCase)

        response = await use_case.execute(
            UpdateArticleRequest(
                user_id=jake_id, slug=article.slug, title="Did you train your dragon?"
            )
        )

        assert response.article.title == "Did you train your dragon?"
        assert response.article.slug == article.slug
        assert response.article.body == "You have to believe"

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        anna_id = await register(unit_env, "anna")
        article = await create(unit_env, jake_id)
        use_case = await unit_env.get(UpdateArticleUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateArticleRequest(user_id=anna_id, slug=article.slug, body="mine")
            )


class TestDeleteArticle:
    """Tests for DeleteArticleUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        article = await create(unit_env, jake_id)
        delete = await unit_env.get(DeleteArticleUseCase)
        get = await unit_env.get(GetArticleUseCase)

        await delete.execute(DeleteArticleRequest(user_id=jake_id, slug=article.slug))

        with pytest.raises(NotFoundError):
            await get.execute(GetArticleRequest(slug=article.slug))

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        anna_id = await register(unit_env, "anna")
        article = await create(unit_env, jake_id)
        delete = await unit_env.get(DeleteArticleUseCase)

        with pytest.raises(ForbiddenError):
            await delete.execute(
                DeleteArticleRequest(user_id=anna_id, slug=article.slug)
            )


class TestFavoriteArticle:
    """Tests for favoriting and unfavoriting."""

    @pytest.mark.asyncio
    async def test_favorite_counts_once_per_user(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        anna_id = await register(unit_env, "anna")
        article = await create(unit_env, jake_id)
        favorite = await unit_env.get(FavoriteArticleUseCase)
        get = await unit_env.get(GetArticleUseCase)

        await favorite.execute(
            FavoriteArticleRequest(user_id=anna_id, slug=article.slug)
        )
        response = await favorite.execute(
            FavoriteArticleRequest(user_id=anna_id, slug=article.slug)
        )

        assert response.article.favorited is True
        assert response.article.favorites_count == 1

        as_jake = await get.execute(
            GetArticleRequest(slug=article.slug, viewer_id=jake_id)
        )
        assert as_jake.article.favorited is False
        assert as_jake.article.favorites_count == 1

    @pytest.mark.asyncio
    async def test_unfavorite(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        article = await create(unit_env, jake_id)
        favorite = await unit_env.get(FavoriteArticleUseCase)
        unfavorite = await unit_env.get(UnfavoriteArticleUseCase)

        await favorite.execute(
            FavoriteArticleRequest(user_id=jake_id, slug=article.slug)
        )
        response = await unfavorite.execute(
            FavoriteArticleRequest(user_id=jake_id, slug=article.slug)
        )

        assert response.article.favorited is False
        assert response.article.favorites_count == 0

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        favorite = await unit_env.get(FavoriteArticleUseCase)

        with pytest.raises(NotFoundError):
            await favorite.execute(
                FavoriteArticleRequest(user_id=jake_id, slug="no-such-article")
            )
