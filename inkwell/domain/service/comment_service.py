"""Comment domain service.

This is the comment store: every rule about creating, reading, editing,
deleting and liking comments lives here. Reads never return soft-deleted
comments because the repositories filter them on every query.
"""

from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4

import logfire

from inkwell.domain.error import ForbiddenError, NotFoundError, ValidationError
from inkwell.domain.model.comment import COMMENT_MAX_LENGTH, Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.value import CommentId, LikeResult, PostId, UserId, Username

from .base import Service


@dataclass
class CommentPage:
    """A page of comments plus the total number of matches."""

    items: list[Comment]
    total: int


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, used to check the target post
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    @staticmethod
    def clean_content(content: str | None) -> str:
        """Strip and validate comment content.

        Raises:
            ValidationError: If content is empty or too long
        """
        cleaned = (content or "").strip()
        if not cleaned:
            raise ValidationError("Comment content is required.")
        if len(cleaned) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment content must be at most {COMMENT_MAX_LENGTH} characters."
            )
        return cleaned

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to a root comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_username: Author username (denormalised onto the comment)
            content: Comment text
            parent_id: Root comment being replied to (None for a root comment)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid, or the parent belongs to
                another post or is itself a reply
            NotFoundError: If the post or the parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = self.clean_content(content)

            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found for new comment", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post."
                    )
                if not parent.is_root:
                    logfire.warn(
                        "Reply to a reply rejected",
                        parent_id=str(parent_id),
                        grandparent_id=str(parent.parent_id),
                    )
                    raise ValidationError("Replies can only be made to root comments.")

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_username=author_username,
                content=content,
                parent_id=parent_id,
                liked_by=frozenset(),
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def find_roots_by_post(
        self, post_id: PostId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of a post's root comments, newest first.

        ``total`` counts every root of the post, regardless of the page.
        """
        offset = self.page_offset(page, limit)
        with logfire.span(
            "comment_service.find_roots_by_post",
            post_id=str(post_id),
            page=page,
            limit=limit,
        ):
            items = await self.comment_repository.find_roots_by_post(
                post_id=post_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_roots_by_post(post_id)
            logfire.info(
                "Root comments retrieved for post",
                post_id=str(post_id),
                count=len(items),
                total=total,
            )
            return CommentPage(items=items, total=total)

    async def find_by_author(
        self, author_id: UserId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of a user's root comments, newest first."""
        offset = self.page_offset(page, limit)
        with logfire.span(
            "comment_service.find_by_author",
            author_id=str(author_id),
            page=page,
            limit=limit,
        ):
            items = await self.comment_repository.find_roots_by_author(
                author_id=author_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_roots_by_author(author_id)
            logfire.info(
                "Root comments retrieved for author",
                author_id=str(author_id),
                count=len(items),
                total=total,
            )
            return CommentPage(items=items, total=total)

    async def find_replies_by_parents(
        self, parent_ids: Sequence[CommentId]
    ) -> list[Comment]:
        """Get the replies of several comments in a single query, oldest first."""
        if not parent_ids:
            return []
        with logfire.span(
            "comment_service.find_replies_by_parents", parent_count=len(parent_ids)
        ):
            replies = await self.comment_repository.find_replies_by_parents(
                list(parent_ids)
            )
            logfire.info("Replies retrieved", count=len(replies))
            return replies

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def _get_owned(self, comment_id: CommentId, requester_id: UserId) -> Comment:
        comment = await self.get_comment_by_id(comment_id)
        if comment.author_id != requester_id:
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                requester_id=str(requester_id),
            )
            raise ForbiddenError("comment", str(comment_id), str(requester_id))
        return comment

    async def update_comment(
        self, comment_id: CommentId, requester_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's content. Only the author may do this.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
            ForbiddenError: If the requester is not the author
            ValidationError: If the new content is invalid
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            await self._get_owned(comment_id, requester_id)
            content = self.clean_content(content)

            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                # Deleted between the ownership check and the update
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(content),
            )
            return updated

    async def soft_delete(self, comment_id: CommentId, requester_id: UserId) -> None:
        """Hide a comment from all reads. Only the author may do this.

        Replies are left untouched and stay retrievable on their own.

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.soft_delete",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            await self._get_owned(comment_id, requester_id)
            if not await self.comment_repository.soft_delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> LikeResult:
        """Like the comment if the user hasn't yet, unlike it otherwise.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            result = await self.comment_repository.toggle_like(comment_id, user_id)
            if result is None:
                logfire.warn("Comment not found for like", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                liked=result.liked,
                like_count=result.like_count,
            )
            return result
