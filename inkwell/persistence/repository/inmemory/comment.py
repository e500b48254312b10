"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, LikeResult, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _visible(self) -> list[Comment]:
        return [c for c in self._comments.values() if not c.is_deleted]

    def _roots(self, **match: object) -> list[Comment]:
        roots = [
            c
            for c in self._visible()
            if c.parent_id is None
            and all(getattr(c, k) == v for k, v in match.items())
        ]
        roots.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return roots

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a visible comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        return comment

    async def find_roots_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find root comments of a post, newest first."""
        return self._roots(post_id=post_id)[offset : offset + limit]

    async def count_roots_by_post(self, post_id: PostId) -> int:
        """Count visible root comments of a post."""
        return len(self._roots(post_id=post_id))

    async def find_roots_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find root comments written by a user, newest first."""
        return self._roots(author_id=author_id)[offset : offset + limit]

    async def count_roots_by_author(self, author_id: UserId) -> int:
        """Count visible root comments written by a user."""
        return len(self._roots(author_id=author_id))

    async def find_replies_by_parents(
        self, parent_ids: Sequence[CommentId]
    ) -> list[Comment]:
        """Find visible replies of all given parents, oldest first."""
        wanted = set(parent_ids)
        replies = [c for c in self._visible() if c.parent_id in wanted]
        replies.sort(key=lambda c: (c.created_at, c.id))
        return replies

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a visible comment."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"content": content, "updated_at": utcnow()})
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a visible comment as deleted."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return False
        self._comments[comment_id] = comment.model_copy(
            update={"is_deleted": True, "updated_at": utcnow()}
        )
        return True

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Toggle the user's like on a visible comment."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return None
        liked = user_id not in comment.liked_by
        liked_by = comment.liked_by | {user_id} if liked else comment.liked_by - {user_id}
        self._comments[comment_id] = comment.model_copy(update={"liked_by": liked_by})
        return LikeResult(liked=liked, like_count=len(liked_by))
