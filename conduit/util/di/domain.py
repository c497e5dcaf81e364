"""Domain layer DI providers."""

from dishka import Scope, provide

from conduit.config import AuthSettings
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from conduit.domain.service import (
    ArticleService,
    CommentService,
    CredentialService,
    FavoriteService,
    IdentityResolver,
    JWTService,
    SlugGenerator,
    SocialGraphService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_resolver(self, jwt_service: JWTService) -> IdentityResolver:
        """Provide Authorization header resolver."""
        return IdentityResolver(jwt_service=jwt_service)

    @provide
    def get_credential_service(self) -> CredentialService:
        """Provide password hashing service."""
        return CredentialService()

    @provide
    def get_slug_generator(self) -> SlugGenerator:
        """Provide slug generator."""
        return SlugGenerator()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository, slug_generator: SlugGenerator
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository, slug_generator=slug_generator
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
        )

    @provide
    def get_social_graph_service(
        self, user_repository: UserRepository
    ) -> SocialGraphService:
        """Provide follow graph service."""
        return SocialGraphService(user_repository=user_repository)

    @provide
    def get_favorite_service(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> FavoriteService:
        """Provide favorites ledger service."""
        return FavoriteService(
            user_repository=user_repository, article_repository=article_repository
        )
