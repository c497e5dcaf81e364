"""Register user use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    UserInfo,
    parse_value,
    require_text,
    to_user_info,
)
from conduit.domain.model import User
from conduit.domain.service import CredentialService, JWTService, UserService
from conduit.domain.value import Email, UserId, Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterUserResponse(CamelModel):
    """Register user response."""

    user: UserInfo


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account with username, email and password."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            credential_service: Password hashing service
            jwt_service: Token issuing service
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Validate username, email and password
        2. Hash the password
        3. Save the user (username and email must be unused)
        4. Issue a token for the new user

        Args:
            request: Registration data

        Returns:
            The new user with a fresh token

        Raises:
            ValidationError: If a field is blank or malformed
            DuplicateUniqueError: If username or email is taken
        """
        username = parse_value(Username, "username", request.username or "")
        email = parse_value(Email, "email", request.email or "")
        password = require_text("password", request.password)

        with logfire.span("register_user.execute", username=str(username)):
            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                created_at=now,
                updated_at=now,
            )
            user = self.credential_service.set_password(user, password)
            saved = await self.user_service.save(user)

            token = self.jwt_service.issue(str(saved.id), str(saved.username))
            logfire.info("User registered", user_id=str(saved.id))
            return RegisterUserResponse(user=to_user_info(saved, token))
