"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from conduit.domain.error import NotFoundError
from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.repository import ArticleRepository, CommentRepository
from conduit.domain.value import CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    The article keeps the ordered list of its comment ids; each comment
    also points back at its article.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository

    async def add_comment(
        self, article: Article, author_id: UserId, body: str
    ) -> Comment:
        """Create a comment and append it to the article.

        Args:
            article: Article being commented on
            author_id: Author user ID
            body: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.add_comment",
            slug=str(article.slug),
            author_id=str(author_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                body=body,
                author_id=author_id,
                article_id=article.id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            await self.article_repository.save(
                article.model_copy(
                    update={"comment_ids": [*article.comment_ids, saved.id]}
                )
            )
            logfire.info(
                "Comment created", comment_id=str(saved.id), slug=str(article.slug)
            )
            return saved

    async def get_comment(self, article: Article, comment_id: str) -> Comment:
        """Get a comment by ID.

        Args:
            article: Article the comment is addressed under
            comment_id: Comment ID as given by the client

        Returns:
            Comment entity

        Raises:
            NotFoundError: If the id is malformed or no such comment exists
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            try:
                cid = CommentId(UUID(comment_id))
            except ValueError:
                raise NotFoundError("Comment", comment_id)

            comment = await self.comment_repository.find_by_id(cid)
            if not comment:
                logfire.warn(
                    "Comment not found", comment_id=comment_id, slug=str(article.slug)
                )
                raise NotFoundError("Comment", comment_id)
            return comment

    async def list_for_article(self, article: Article) -> list[Comment]:
        """Get an article's comments, newest first.

        Args:
            article: Article whose comments to load

        Returns:
            Comments ordered by created_at descending
        """
        with logfire.span(
            "comment_service.list_for_article", slug=str(article.slug)
        ):
            comments = await self.comment_repository.find_by_ids(article.comment_ids)
            logfire.info(
                "Comments retrieved", slug=str(article.slug), count=len(comments)
            )
            return comments

    async def delete_comment(self, article: Article, comment: Comment) -> Article:
        """Detach a comment from its article, then delete it.

        Args:
            article: Article holding the comment
            comment: Comment to delete

        Returns:
            The saved article without the comment id
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            slug=str(article.slug),
        ):
            remaining = [c for c in article.comment_ids if str(c) != str(comment.id)]
            saved = await self.article_repository.save(
                article.model_copy(update={"comment_ids": remaining})
            )
            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=str(comment.id))
            return saved
