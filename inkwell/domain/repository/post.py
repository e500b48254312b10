"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.value import LikeResult, PostId, Slug, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by its slug.

        Args:
            slug: The post's slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Post]:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Page of posts
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts."""
        pass

    @abstractmethod
    async def search(
        self, terms: Sequence[str], limit: int = 10, offset: int = 0
    ) -> List[Post]:
        """Find posts whose title or content contains any of the terms.

        Matching is case-insensitive. Results are newest first.

        Args:
            terms: Search terms (at least one)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Page of matching posts
        """
        pass

    @abstractmethod
    async def count_search(self, terms: Sequence[str]) -> int:
        """Count posts matching any of the terms."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment the view counter by 1.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Add the user to ``liked_by`` if absent, remove it otherwise.

        Returns:
            New like state, or None if the post doesn't exist
        """
        pass
