"""Update current user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase, CamelModel
from conduit.application.usecase.common import (
    UserInfo,
    load_actor,
    parse_value,
    require_text,
    to_user_info,
)
from conduit.domain.service import CredentialService, JWTService, UserService
from conduit.domain.value import Email, Username


class UpdateCurrentUserRequest(BaseModel):
    """Update current user request. ``None`` leaves a field unchanged."""

    user_id: str  # From the verified token
    username: str | None = None
    email: str | None = None
    password: str | None = None
    bio: str | None = None
    image: str | None = None


class UpdateCurrentUserResponse(CamelModel):
    """Update current user response."""

    user: UserInfo


class UpdateCurrentUserUseCase(BaseUseCase):
    """Use case for editing the authenticated user's account and profile."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize update current user use case.

        Args:
            user_service: User domain service
            credential_service: Password hashing service
            jwt_service: Token issuing service
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: UpdateCurrentUserRequest
    ) -> UpdateCurrentUserResponse:
        """Execute update flow.

        A new username or password takes effect immediately; the returned
        token carries the new username.

        Args:
            request: Fields to change

        Returns:
            The updated user with a fresh token

        Raises:
            InvalidTokenError: If the token's user no longer exists
            ValidationError: If a supplied field is malformed
            DuplicateUniqueError: If the new username or email is taken
        """
        user = await load_actor(self.user_service, request.user_id)

        with logfire.span("update_current_user.execute", user_id=request.user_id):
            changes: dict[str, object] = {}
            if request.username is not None:
                changes["username"] = parse_value(
                    Username, "username", request.username
                )
            if request.email is not None:
                changes["email"] = parse_value(Email, "email", request.email)
            if request.bio is not None:
                changes["bio"] = request.bio
            if request.image is not None:
                changes["image"] = request.image
            changes["updated_at"] = datetime.now()

            user = user.model_copy(update=changes)
            if request.password is not None:
                password = require_text("password", request.password)
                user = self.credential_service.set_password(user, password)

            saved = await self.user_service.save(user)
            logfire.info(
                "User updated",
                user_id=str(saved.id),
                fields=sorted(k for k in changes if k != "updated_at"),
                password_changed=request.password is not None,
            )

            token = self.jwt_service.issue(str(saved.id), str(saved.username))
            return UpdateCurrentUserResponse(user=to_user_info(saved, token))
