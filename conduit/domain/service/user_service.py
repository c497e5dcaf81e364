"""User domain service."""

import logfire

from conduit.domain.error import DuplicateUniqueError, NotFoundError
from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import Email, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if it doesn't exist.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Args:
            username: Username (any case)

        Returns:
            User entity

        Raises:
            NotFoundError: If no user has that username
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def find_by_username(self, username: str) -> User | None:
        """Get user by username, or None.

        A malformed username can't belong to anyone and returns None.

        Args:
            username: Username (any case)

        Returns:
            User if found, None otherwise
        """
        try:
            value = Username(username)
        except ValueError:
            return None
        return await self.user_repository.find_by_username(value)

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email, or None.

        Args:
            email: Email address (any case)

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_email"):
            try:
                value = Email(email)
            except ValueError:
                return None
            return await self.user_repository.find_by_email(value)

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[str, User]:
        """Load several users keyed by their string id.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of ``str(user.id)`` to user
        """
        unique_ids = list({str(uid): uid for uid in user_ids}.values())
        users = await self.user_repository.find_by_ids(unique_ids)
        return {str(user.id): user for user in users}

    async def save(self, user: User) -> User:
        """Save user (create or update), enforcing unique username and email.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateUniqueError: If another user has the username or email
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=str(user.username)
        ):
            await self._ensure_unique(user)
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved", user_id=str(saved.id), username=str(saved.username)
            )
            return saved

    async def _ensure_unique(self, user: User) -> None:
        by_username = await self.user_repository.find_by_username(user.username)
        if by_username and str(by_username.id) != str(user.id):
            logfire.info("Username already taken", username=str(user.username))
            raise DuplicateUniqueError("username")

        by_email = await self.user_repository.find_by_email(user.email)
        if by_email and str(by_email.id) != str(user.id):
            logfire.info("Email already taken", user_id=str(user.id))
            raise DuplicateUniqueError("email")
