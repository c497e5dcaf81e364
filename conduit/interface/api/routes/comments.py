"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status

from conduit.application.usecase.base import CamelModel
from conduit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from conduit.domain.service import IdentityResolver

router = APIRouter(
    prefix="/articles/{slug}/comments", tags=["comments"], route_class=DishkaRoute
)


class NewCommentFields(CamelModel):
    """Fields of a new comment."""

    body: str | None = None


class AddCommentAPIRequest(CamelModel):
    """API request for adding a comment."""

    comment: NewCommentFields


@router.post("", response_model=AddCommentResponse)
async def add_comment(
    slug: str,
    request: AddCommentAPIRequest,
    identity_resolver: FromDishka[IdentityResolver],
    add_comment_use_case: FromDishka[AddCommentUseCase],
    authorization: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on an article. Requires authentication."""
    identity = identity_resolver.require(authorization)
    return await add_comment_use_case.execute(
        AddCommentRequest(user_id=identity.id, slug=slug, body=request.comment.body)
    )


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    slug: str,
    identity_resolver: FromDishka[IdentityResolver],
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List an article's comments, newest first. Authentication optional."""
    identity = identity_resolver.optional(authorization)
    return await list_comments_use_case.execute(
        ListCommentsRequest(slug=slug, viewer_id=identity.id if identity else None)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    slug: str,
    comment_id: str,
    identity_resolver: FromDishka[IdentityResolver],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment.

    Requires authentication; only the comment's author may delete it.
    """
    identity = identity_resolver.require(authorization)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(user_id=identity.id, slug=slug, comment_id=comment_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
