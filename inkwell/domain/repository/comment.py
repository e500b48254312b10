"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, LikeResult, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Soft-deleted comments are invisible through every read method; no
    method takes an ``include_deleted`` switch.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a visible comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find root comments of a post, newest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of root comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_roots_by_post(self, post_id: PostId) -> int:
        """Count all visible root comments of a post."""
        pass

    @abstractmethod
    async def find_roots_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find root comments written by a user, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of root comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_roots_by_author(self, author_id: UserId) -> int:
        """Count all visible root comments written by a user."""
        pass

    @abstractmethod
    async def find_replies_by_parents(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find replies to any of the given parents in one query.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Visible replies ordered by created_at ascending
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
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a visible comment.

        Returns:
            Updated comment, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a comment as deleted.

        Returns:
            True if a visible comment was marked, False otherwise
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Add the user to ``liked_by`` if absent, remove it otherwise.

        Each membership change is a single atomic update in the store.

        Returns:
            New like state, or None if the comment doesn't exist or is deleted
        """
        pass
