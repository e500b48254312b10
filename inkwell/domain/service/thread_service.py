"""Comment thread assembly.

Turns flat comment pages into threads: each root comment gets its direct
replies attached. Replies for a whole page are fetched with one batch query
instead of one query per root.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

import logfire

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, PostId, UserId

from .base import Service
from .comment_service import CommentPage, CommentService

NO_REPLIES_MESSAGE = (
    "No replies yet for this comment. Be the one to comment this post"
)


@dataclass
class CommentThread:
    """A comment and, when assembled with nesting, its direct replies.

    ``replies`` and ``total_replies`` are None when replies were not requested.
    """

    comment: Comment
    replies: Optional[list[Comment]] = None
    total_replies: Optional[int] = None
    replies_message: Optional[str] = None


@dataclass
class ThreadPage:
    """Page of comment threads with pagination metadata."""

    total: int
    page: int
    limit: int
    comments: list[CommentThread]


def group_by_parent(replies: list[Comment]) -> dict[CommentId, list[Comment]]:
    """Group replies by parent ID, keeping their incoming order."""
    grouped: dict[CommentId, list[Comment]] = defaultdict(list)
    for reply in replies:
        if reply.parent_id is not None:
            grouped[reply.parent_id].append(reply)
    return grouped


class ThreadService(Service):
    """Assembles paginated comment threads."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize thread service.

        Args:
            comment_service: Comment service used for all store access
        """
        self.comment_service = comment_service

    async def assemble(
        self,
        post_id: PostId,
        page: int,
        limit: int,
        include_nested: bool = True,
    ) -> ThreadPage:
        """Assemble one page of a post's comment threads.

        Steps:
        1. Fetch the page of root comments and the total root count
        2. Return an empty page straight away when the post has no roots
        3. Without nesting, return the roots as they are
        4. Otherwise fetch every reply of the page's roots in one query,
           group them by parent and attach them to their roots

        Args:
            post_id: Post ID
            page: 1-based page number
            limit: Page size
            include_nested: Whether to attach replies

        Returns:
            Page of threads, roots newest first, replies oldest first
        """
        with logfire.span(
            "thread_service.assemble",
            post_id=str(post_id),
            page=page,
            limit=limit,
            include_nested=include_nested,
        ):
            roots = await self.comment_service.find_roots_by_post(post_id, page, limit)
            return await self._build_page(roots, page, limit, include_nested)

    async def assemble_for_author(
        self, author_id: UserId, page: int, limit: int
    ) -> ThreadPage:
        """Assemble one page of a user's own root comments with their replies."""
        with logfire.span(
            "thread_service.assemble_for_author",
            author_id=str(author_id),
            page=page,
            limit=limit,
        ):
            roots = await self.comment_service.find_by_author(author_id, page, limit)
            return await self._build_page(roots, page, limit, include_nested=True)

    async def get_thread(self, comment_id: CommentId) -> CommentThread:
        """Get a single comment with its replies.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span("thread_service.get_thread", comment_id=str(comment_id)):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            replies = await self.comment_service.find_replies_by_parents([comment.id])
            return CommentThread(
                comment=comment,
                replies=replies,
                total_replies=len(replies),
                replies_message=None if replies else NO_REPLIES_MESSAGE,
            )

    async def _build_page(
        self,
        roots: CommentPage,
        page: int,
        limit: int,
        include_nested: bool,
    ) -> ThreadPage:
        if roots.total == 0:
            return ThreadPage(total=0, page=page, limit=limit, comments=[])

        if not include_nested:
            return ThreadPage(
                total=roots.total,
                page=page,
                limit=limit,
                comments=[CommentThread(comment=root) for root in roots.items],
            )

        replies = await self.comment_service.find_replies_by_parents(
            [root.id for root in roots.items]
        )
        grouped = group_by_parent(replies)

        threads = []
        for root in roots.items:
            root_replies = grouped.get(root.id, [])
            threads.append(
                CommentThread(
                    comment=root,
                    replies=root_replies,
                    total_replies=len(root_replies),
                )
            )

        logfire.info(
            "Comment threads assembled",
            roots=len(threads),
            replies=len(replies),
            total=roots.total,
        )
        return ThreadPage(
            total=roots.total, page=page, limit=limit, comments=threads
        )
