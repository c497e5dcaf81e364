"""Get profile use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import ProfileInfo, load_viewer, to_profile
from conduit.domain.service import UserService


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str
    viewer_id: str | None = None  # Set when a token was supplied


class GetProfileResponse(CamelModel):
    """Get profile response."""

    profile: ProfileInfo


class GetProfileUseCase(BaseUseCase):
    """Use case for reading a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        ``following`` is relative to the viewer and always False for
        anonymous requests.

        Raises:
            NotFoundError: If no user has the username
        """
        user = await self.user_service.get_by_username(request.username)
        viewer = await load_viewer(self.user_service, request.viewer_id)
        return GetProfileResponse(profile=to_profile(user, viewer))
