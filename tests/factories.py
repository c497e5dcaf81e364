"""Builders for domain objects used across tests."""

from datetime import datetime
from uuid import uuid4

from conduit.application.usecase.auth.register_user import (
    RegisterUserRequest,
    RegisterUserUseCase,
)
from conduit.domain.model import Article, Comment, User
from conduit.domain.service import UserService
from conduit.domain.value import ArticleId, CommentId, Email, Slug, UserId, Username
from conduit.util.password import hash_password


def make_user(username: str = "jake", password: str | None = None, **kwargs) -> User:
    """Build a user, hashing ``password`` when given."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "email": Email(f"{username}@example.com"),
    }
    if password is not None:
        credentials = hash_password(password)
        fields["password_salt"] = credentials.salt
        fields["password_hash"] = credentials.hash
    fields.update(kwargs)
    return User(**fields)


def make_article(author: User, slug: str = "how-to-train-abc123", **kwargs) -> Article:
    """Build an article written by ``author``."""
    fields = {
        "id": ArticleId(uuid4()),
        "slug": Slug(slug),
        "title": "How to train your dragon",
        "description": "Ever wonder how?",
        "body": "You have to believe",
        "tag_list": ["dragons", "training"],
        "author_id": author.id,
        "created_at": datetime.now(),
        "updated_at": datetime.now(),
    }
    fields.update(kwargs)
    return Article(**fields)


def make_comment(author: User, article: Article, **kwargs) -> Comment:
    """Build a comment by ``author`` on ``article``."""
    fields = {
        "id": CommentId(uuid4()),
        "body": "Thank you so much!",
        "author_id": author.id,
        "article_id": article.id,
    }
    fields.update(kwargs)
    return Comment(**fields)


async def register(container, username: str, password: str = "jakejake") -> str:
    """Register ``username`` through the use case and return its user id."""
    use_case = await container.get(RegisterUserUseCase)
    await use_case.execute(
        RegisterUserRequest(
            username=username, email=f"{username}@example.com", password=password
        )
    )
    user_service = await container.get(UserService)
    user = await user_service.get_by_username(username)
    return str(user.id)
