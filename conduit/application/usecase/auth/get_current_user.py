"""Get current user use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import UserInfo, load_actor, to_user_info
from conduit.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified token


class GetCurrentUserResponse(CamelModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated user with a refreshed token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
            jwt_service: Token issuing service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            InvalidTokenError: If the token's user no longer exists
        """
        user = await load_actor(self.user_service, request.user_id)
        token = self.jwt_service.issue(str(user.id), str(user.username))
        return GetCurrentUserResponse(user=to_user_info(user, token))
