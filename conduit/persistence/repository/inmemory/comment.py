"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from conduit.domain.model.comment import Comment
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[str, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(str(comment_id))

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments, newest first."""
        found = [
            self._comments[str(cid)]
            for cid in comment_ids
            if str(cid) in self._comments
        ]
        return sorted(found, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[str(comment.id)] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(str(comment_id), None)
