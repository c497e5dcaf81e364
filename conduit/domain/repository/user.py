"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from conduit.domain.model.user import User
from conduit.domain.value import ArticleId, Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (missing ids are skipped).

        Args:
            user_ids: User identifiers

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            DuplicateUniqueError: If username or email is taken by another user
        """
        pass

    @abstractmethod
    async def count_favorited_by(self, article_id: ArticleId) -> int:
        """Count users whose favorites contain the article.

        Args:
            article_id: The article's unique identifier

        Returns:
            Number of distinct users that favorited the article
        """
        pass
