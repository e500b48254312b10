"""In-memory post repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import LikeResult, PostId, Slug, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Unlike the database, deleting a post here leaves its comments in place.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)

    def _matching(self, terms: Sequence[str]) -> list[Post]:
        lowered = [t.lower() for t in terms]
        return self._newest_first(
            [
                p
                for p in self._posts.values()
                if any(t in p.title.lower() or t in p.content.lower() for t in lowered)
            ]
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[Post]:
        """Find posts newest first."""
        return self._newest_first(list(self._posts.values()))[offset : offset + limit]

    async def count(self) -> int:
        """Count all posts."""
        return len(self._posts)

    async def search(
        self, terms: Sequence[str], limit: int = 10, offset: int = 0
    ) -> list[Post]:
        """Find posts matching any term, newest first."""
        return self._matching(terms)[offset : offset + limit]

    async def count_search(self, terms: Sequence[str]) -> int:
        """Count posts matching any term."""
        return len(self._matching(terms))

    async def save(self, post: Post) -> Post:
        """Save a post.

        Raises:
            IntegrityError: If another post has the same slug
        """
        existing = await self.find_by_slug(post.slug)
        if existing is not None and existing.id != post.id:
            raise IntegrityError("Duplicate slug", None, Exception())
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Increment views by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        viewed = post.model_copy(update={"views": post.views + 1})
        self._posts[post_id] = viewed
        return viewed

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Toggle the user's like on a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        liked = user_id not in post.liked_by
        liked_by = post.liked_by | {user_id} if liked else post.liked_by - {user_id}
        self._posts[post_id] = post.model_copy(update={"liked_by": liked_by})
        return LikeResult(liked=liked, like_count=len(liked_by))
