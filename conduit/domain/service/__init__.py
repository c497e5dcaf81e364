"""Domain services."""

from .article_service import ArticleService
from .authorization import (
    can_delete_comment,
    can_modify,
    ensure_can_delete_comment,
    ensure_can_modify,
)
from .base import Service, contains_id
from .comment_service import CommentService
from .credential_service import CredentialService
from .favorite_service import FavoriteService
from .identity_resolver import IdentityResolver
from .jwt_service import JWTService
from .slug_generator import SlugGenerator
from .social_graph_service import SocialGraphService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "CommentService",
    "CredentialService",
    "FavoriteService",
    "IdentityResolver",
    "JWTService",
    "Service",
    "SlugGenerator",
    "SocialGraphService",
    "UserService",
    "can_delete_comment",
    "can_modify",
    "contains_id",
    "ensure_can_delete_comment",
    "ensure_can_modify",
]
