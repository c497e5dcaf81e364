"""Unit tests for profile use cases."""

from dishka import AsyncContainer
import pytest

from conduit.application.usecase.profile.follow_user import (
    FollowUserRequest,
    FollowUserUseCase,
    UnfollowUserUseCase,
)
from conduit.application.usecase.profile.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
)
from conduit.domain.error import NotFoundError
from conduit.domain.service import UserService
from tests.factories import register
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFollowUserUseCase:
    """Tests for following and unfollowing."""

    @pytest.mark.asyncio
    async def test_follow_then_view_profile(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        await register(unit_env, "celeb")
        follow = await unit_env.get(FollowUserUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)

        response = await follow.execute(
            FollowUserRequest(user_id=jake_id, username="celeb")
        )
        assert response.profile.following is True

        viewed = await get_profile.execute(
            GetProfileRequest(username="celeb", viewer_id=jake_id)
        )
        anonymous = await get_profile.execute(GetProfileRequest(username="celeb"))
        assert viewed.profile.following is True
        assert anonymous.profile.following is False

    @pytest.mark.asyncio
    async def test_follow_twice_keeps_single_entry(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        await register(unit_env, "celeb")
        follow = await unit_env.get(FollowUserUseCase)
        user_service = await unit_env.get(UserService)

        await follow.execute(FollowUserRequest(user_id=jake_id, username="celeb"))
        await follow.execute(FollowUserRequest(user_id=jake_id, username="celeb"))

        jake = await user_service.get_by_username("jake")
        assert len(jake.following) == 1

    @pytest.mark.asyncio
    async def test_unfollow(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        await register(unit_env, "celeb")
        follow = await unit_env.get(FollowUserUseCase)
        unfollow = await unit_env.get(UnfollowUserUseCase)

        await follow.execute(FollowUserRequest(user_id=jake_id, username="celeb"))
        response = await unfollow.execute(
            FollowUserRequest(user_id=jake_id, username="celeb")
        )

        assert response.profile.following is False

    @pytest.mark.asyncio
    async def test_follow_unknown_user(self, unit_env: AsyncContainer):
        jake_id = await register(unit_env, "jake")
        follow = await unit_env.get(FollowUserUseCase)

        with pytest.raises(NotFoundError):
            await follow.execute(FollowUserRequest(user_id=jake_id, username="ghost"))
