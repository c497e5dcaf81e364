"""Delete article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.usecase.common import load_actor
from conduit.domain.service import ArticleService, UserService, ensure_can_modify


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    user_id: str  # Acting user, from the verified token
    slug: str


class DeleteArticleUseCase(BaseUseCase):
    """Use case for deleting an article. Only its author may delete it.

    Comments and favorites that reference the article are left in place.
    """

    def __init__(
        self, user_service: UserService, article_service: ArticleService
    ) -> None:
        """Initialize delete article use case.

        Args:
            user_service: User domain service
            article_service: Article domain service
        """
        self.user_service = user_service
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> None:
        """Execute delete article flow.

        Raises:
            InvalidTokenError: If the acting user no longer exists
            NotFoundError: If the article doesn't exist
            ForbiddenError: If the acting user isn't the author
        """
        actor = await load_actor(self.user_service, request.user_id)
        article = await self.article_service.get_by_slug(request.slug)
        ensure_can_modify(article, actor.id)

        await self.article_service.delete_article(article)
