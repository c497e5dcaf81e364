"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from conduit.application.usecase.profile import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    UnfollowUserUseCase,
)
from conduit.domain.service import IdentityResolver

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


@router.get("/{username}", response_model=GetProfileResponse)
async def get_profile(
    username: str,
    identity_resolver: FromDishka[IdentityResolver],
    get_profile_use_case: FromDishka[GetProfileUseCase],
    authorization: str | None = Header(default=None),
) -> GetProfileResponse:
    """Get a user's profile.

    Authentication optional; ``following`` is relative to the caller.
    """
    identity = identity_resolver.optional(authorization)
    return await get_profile_use_case.execute(
        GetProfileRequest(
            username=username, viewer_id=identity.id if identity else None
        )
    )


@router.post("/{username}/follow", response_model=FollowUserResponse)
async def follow_user(
    username: str,
    identity_resolver: FromDishka[IdentityResolver],
    follow_user_use_case: FromDishka[FollowUserUseCase],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Follow a user. Requires authentication."""
    identity = identity_resolver.require(authorization)
    return await follow_user_use_case.execute(
        FollowUserRequest(user_id=identity.id, username=username)
    )


@router.delete("/{username}/follow", response_model=FollowUserResponse)
async def unfollow_user(
    username: str,
    identity_resolver: FromDishka[IdentityResolver],
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Unfollow a user. Requires authentication."""
    identity = identity_resolver.require(authorization)
    return await unfollow_user_use_case.execute(
        FollowUserRequest(user_id=identity.id, username=username)
    )
