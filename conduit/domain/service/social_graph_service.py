"""Follow relationship between users."""

import logfire

from conduit.domain.model.user import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import UserId

from .base import Service, contains_id


class SocialGraphService(Service):
    """Maintains ``User.following``.

    Each call reads, modifies and writes one user document. Concurrent
    updates to the same user can overwrite each other (last write wins).
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize social graph service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def follow(self, user: User, target_id: UserId) -> User:
        """Add ``target_id`` to the user's following list if absent.

        Args:
            user: Acting user
            target_id: User to follow

        Returns:
            The saved user
        """
        with logfire.span(
            "social_graph.follow", user_id=str(user.id), target_id=str(target_id)
        ):
            if not self.is_following(user, target_id):
                user = user.model_copy(
                    update={"following": [*user.following, target_id]}
                )
                logfire.info(
                    "User followed", user_id=str(user.id), target_id=str(target_id)
                )
            return await self.user_repository.save(user)

    async def unfollow(self, user: User, target_id: UserId) -> User:
        """Remove ``target_id`` from the user's following list if present.

        Not following the target is not an error.

        Args:
            user: Acting user
            target_id: User to unfollow

        Returns:
            The saved user
        """
        with logfire.span(
            "social_graph.unfollow", user_id=str(user.id), target_id=str(target_id)
        ):
            remaining = [f for f in user.following if str(f) != str(target_id)]
            if len(remaining) != len(user.following):
                logfire.info(
                    "User unfollowed", user_id=str(user.id), target_id=str(target_id)
                )
            user = user.model_copy(update={"following": remaining})
            return await self.user_repository.save(user)

    @staticmethod
    def is_following(user: User | None, target_id: UserId) -> bool:
        """Check whether the user follows ``target_id``.

        Args:
            user: Viewing user, or None for anonymous
            target_id: Possibly followed user

        Returns:
            True if ``target_id`` is in the user's following list
        """
        if user is None:
            return False
        return contains_id(user.following, target_id)
