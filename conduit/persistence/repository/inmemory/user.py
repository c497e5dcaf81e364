"""In-memory user repository for testing."""

from typing import Optional, Sequence

from conduit.domain.error import DuplicateUniqueError
from conduit.domain.model.user import User
from conduit.domain.repository.user import UserRepository
from conduit.domain.value import ArticleId, Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique username and email indexes as the database.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(str(user_id))

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        wanted = {str(uid) for uid in user_ids}
        return [user for key, user in self._users.items() if key in wanted]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        for key, other in self._users.items():
            if key == str(user.id):
                continue
            if other.username == user.username:
                raise DuplicateUniqueError("username")
            if other.email == user.email:
                raise DuplicateUniqueError("email")

        self._users[str(user.id)] = user
        return user

    async def count_favorited_by(self, article_id: ArticleId) -> int:
        """Count users whose favorites contain the article."""
        wanted = str(article_id)
        return sum(
            1
            for user in self._users.values()
            if any(str(f) == wanted for f in user.favorites)
        )
