"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, false, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, LikeResult, PostId, UserId
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.repository.likes import toggle_like
from inkwell.persistence.tables import comments_table

# Every read goes through this predicate; deleted comments are invisible
VISIBLE = comments_table.c.is_deleted == false()


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a visible comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id, VISIBLE)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_roots_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find root comments of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_id.is_(None),
                VISIBLE,
            )
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_roots_by_post(self, post_id: PostId) -> int:
        """Count visible root comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_id.is_(None),
                VISIBLE,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_roots_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find root comments written by a user, newest first."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.author_id == author_id,
                comments_table.c.parent_id.is_(None),
                VISIBLE,
            )
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_roots_by_author(self, author_id: UserId) -> int:
        """Count visible root comments written by a user."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(
                comments_table.c.author_id == author_id,
                comments_table.c.parent_id.is_(None),
                VISIBLE,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies_by_parents(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find visible replies of all given parents, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(list(parent_ids)), VISIBLE)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        exists = await self.session.execute(
            select(comments_table.c.id).where(comments_table.c.id == comment.id)
        )

        if exists.first() is not None:
            # liked_by is only changed through toggle_like
            comment_dict.pop("liked_by")
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a visible comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id, VISIBLE)
            .values(content=content, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(dict(row))

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a visible comment as deleted. Replies are left untouched."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id, VISIBLE)
            .values(is_deleted=True, updated_at=utcnow())
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Toggle the user's like on a visible comment."""
        return await toggle_like(
            self.session, comments_table, comment_id, user_id, visible=VISIBLE
        )
