"""Follow and unfollow use cases."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import ProfileInfo, load_actor, to_profile
from conduit.domain.service import SocialGraphService, UserService


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    user_id: str  # Acting user, from the verified token
    username: str  # User to follow or unfollow


class FollowUserResponse(CamelModel):
    """Profile of the followed or unfollowed user."""

    profile: ProfileInfo


class FollowUserUseCase(BaseUseCase):
    """Use case for following a user. Following twice is a no-op."""

    def __init__(
        self, user_service: UserService, social_graph_service: SocialGraphService
    ) -> None:
        """Initialize follow user use case.

        Args:
            user_service: User domain service
            social_graph_service: Follow graph service
        """
        self.user_service = user_service
        self.social_graph_service = social_graph_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the target user doesn't exist
        """
        actor = await load_actor(self.user_service, request.user_id)
        target = await self.user_service.get_by_username(request.username)

        actor = await self.social_graph_service.follow(actor, target.id)
        return FollowUserResponse(profile=to_profile(target, actor))


class UnfollowUserUseCase(BaseUseCase):
    """Use case for unfollowing a user. Unfollowing a stranger is a no-op."""

    def __init__(
        self, user_service: UserService, social_graph_service: SocialGraphService
    ) -> None:
        """Initialize unfollow user use case.

        Args:
            user_service: User domain service
            social_graph_service: Follow graph service
        """
        self.user_service = user_service
        self.social_graph_service = social_graph_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute unfollow flow.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the target user doesn't exist
        """
        actor = await load_actor(self.user_service, request.user_id)
        target = await self.user_service.get_by_username(request.username)

        actor = await self.social_graph_service.unfollow(actor, target.id)
        return FollowUserResponse(profile=to_profile(target, actor))
