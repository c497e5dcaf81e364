"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from conduit.domain.model.comment import Comment
from conduit.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments, newest first (missing ids are skipped).

        Args:
            comment_ids: Comment identifiers

        Returns:
            Comments found, ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass
