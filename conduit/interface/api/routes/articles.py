"""Article routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, Response, status
from pydantic import Field

from conduit.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    FavoriteArticleRequest,
    FavoriteArticleResponse,
    FavoriteArticleUseCase,
    FeedArticlesRequest,
    FeedArticlesUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
    UnfavoriteArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)
from conduit.application.usecase.base import CamelModel
from conduit.domain.service import IdentityResolver

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class NewArticleFields(CamelModel):
    """Fields of a new article."""

    title: str | None = None
    description: str = ""
    body: str = ""
    tag_list: list[str] = Field(default_factory=list)


class CreateArticleAPIRequest(CamelModel):
    """API request for creating an article."""

    article: NewArticleFields


class UpdateArticleFields(CamelModel):
    """Fields of an article that can be changed."""

    title: str | None = None
    description: str | None = None
    body: str | None = None


class UpdateArticleAPIRequest(CamelModel):
    """API request for updating an article."""

    article: UpdateArticleFields


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    identity_resolver: FromDishka[IdentityResolver],
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    tag: str | None = None,
    author: str | None = None,
    favorited: str | None = None,
    limit: int = Query(default=20, ge=0),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListArticlesResponse:
    """List articles, newest first.

    Authentication optional.

    Args:
        tag: Only articles with this tag
        author: Only articles by this username
        favorited: Only articles favorited by this username
        limit: Page size
        offset: Number of articles to skip
    """
    identity = identity_resolver.optional(authorization)
    return await list_articles_use_case.execute(
        ListArticlesRequest(
            tag=tag,
            author=author,
            favorited=favorited,
            limit=limit,
            offset=offset,
            viewer_id=identity.id if identity else None,
        )
    )


@router.get("/feed", response_model=ListArticlesResponse)
async def feed_articles(
    identity_resolver: FromDishka[IdentityResolver],
    feed_articles_use_case: FromDishka[FeedArticlesUseCase],
    limit: int = Query(default=10, ge=0),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListArticlesResponse:
    """List articles by followed users, newest first.

    Requires authentication.
    """
    identity = identity_resolver.require(authorization)
    return await feed_articles_use_case.execute(
        FeedArticlesRequest(user_id=identity.id, limit=limit, offset=offset)
    )


@router.post("", response_model=CreateArticleResponse)
async def create_article(
    request: CreateArticleAPIRequest,
    identity_resolver: FromDishka[IdentityResolver],
    create_article_use_case: FromDishka[CreateArticleUseCase],
    authorization: str | None = Header(default=None),
) -> CreateArticleResponse:
    """Publish an article.

    Requires authentication.
    """
    identity = identity_resolver.require(authorization)
    return await create_article_use_case.execute(
        CreateArticleRequest(
            user_id=identity.id,
            title=request.article.title,
            description=request.article.description,
            body=request.article.body,
            tag_list=request.article.tag_list,
        )
    )


@router.get("/{slug}", response_model=GetArticleResponse)
async def get_article(
    slug: str,
    identity_resolver: FromDishka[IdentityResolver],
    get_article_use_case: FromDishka[GetArticleUseCase],
    authorization: str | None = Header(default=None),
) -> GetArticleResponse:
    """Get an article by slug. Authentication optional."""
    identity = identity_resolver.optional(authorization)
    return await get_article_use_case.execute(
        GetArticleRequest(slug=slug, viewer_id=identity.id if identity else None)
    )


@router.put("/{slug}", response_model=UpdateArticleResponse)
async def update_article(
    slug: str,
    request: UpdateArticleAPIRequest,
    identity_resolver: FromDishka[IdentityResolver],
    update_article_use_case: FromDishka[UpdateArticleUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateArticleResponse:
    """Edit an article.

    Requires authentication; only the author may edit.
    """
    identity = identity_resolver.require(authorization)
    return await update_article_use_case.execute(
        UpdateArticleRequest(
            user_id=identity.id,
            slug=slug,
            **request.article.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    slug: str,
    identity_resolver: FromDishka[IdentityResolver],
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete an article.

    Requires authentication; only the author may delete.
    """
    identity = identity_resolver.require(authorization)
    await delete_article_use_case.execute(
        DeleteArticleRequest(user_id=identity.id, slug=slug)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{slug}/favorite", response_model=FavoriteArticleResponse)
async def favorite_article(
    slug: str,
    identity_resolver: FromDishka[IdentityResolver],
    favorite_article_use_case: FromDishka[FavoriteArticleUseCase],
    authorization: str | None = Header(default=None),
) -> FavoriteArticleResponse:
    """Favorite an article. Requires authentication."""
    identity = identity_resolver.require(authorization)
    return await favorite_article_use_case.execute(
        FavoriteArticleRequest(user_id=identity.id, slug=slug)
    )


@router.delete("/{slug}/favorite", response_model=FavoriteArticleResponse)
async def unfavorite_article(
    slug: str,
    identity_resolver: FromDishka[IdentityResolver],
    unfavorite_article_use_case: FromDishka[UnfavoriteArticleUseCase],
    authorization: str | None = Header(default=None),
) -> FavoriteArticleResponse:
    """Unfavorite an article. Requires authentication."""
    identity = identity_resolver.require(authorization)
    return await unfavorite_article_use_case.execute(
        FavoriteArticleRequest(user_id=identity.id, slug=slug)
    )
