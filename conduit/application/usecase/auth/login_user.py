"""Login use case."""

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import UserInfo, require_text, to_user_info
from conduit.domain.error import InvalidCredentialsError
from conduit.domain.service import CredentialService, JWTService, UserService


class LoginUserRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginUserResponse(CamelModel):
    """Login response."""

    user: UserInfo


class LoginUserUseCase(BaseUseCase):
    """Use case for exchanging email and password for a token."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            credential_service: Password verification service
            jwt_service: Token issuing service
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginUserRequest) -> LoginUserResponse:
        """Execute login flow.

        An unknown email and a wrong password fail the same way.

        Args:
            request: Login credentials

        Returns:
            The user with a fresh token

        Raises:
            ValidationError: If email or password is blank
            InvalidCredentialsError: If the credentials don't match a user
        """
        email = require_text("email", request.email)
        password = require_text("password", request.password)

        with logfire.span("login_user.execute"):
            user = await self.user_service.find_by_email(email)
            if user is None or not self.credential_service.verify(user, password):
                logfire.info("Login failed")
                raise InvalidCredentialsError()

            token = self.jwt_service.issue(str(user.id), str(user.username))
            logfire.info("User logged in", user_id=str(user.id))
            return LoginUserResponse(user=to_user_info(user, token))
