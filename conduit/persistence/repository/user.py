"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.error import DuplicateUniqueError
from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import ArticleId, Email, UserId, Username
from conduit.persistence.mappers import row_to_user, user_to_dict
from conduit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateUniqueError: If the unique username or email index rejects
                the write
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            field = "email" if "email" in str(e.orig) else "username"
            logfire.warn("Unique constraint violated", table="users", field=field)
            raise DuplicateUniqueError(field) from e

        return user

    async def count_favorited_by(self, article_id: ArticleId) -> int:
        """Count users whose favorites contain the article."""
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.favorites.contains([article_id]))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
