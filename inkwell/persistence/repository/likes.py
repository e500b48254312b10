"""Atomic like toggling on ``liked_by`` array columns."""

from typing import Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Table, any_, func, literal, not_, select
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.value import LikeResult


async def toggle_like(
    session: AsyncSession,
    table: Table,
    row_id: UUID,
    user_id: UUID,
    visible: ColumnElement[bool] | None = None,
) -> Optional[LikeResult]:
    """Remove the user from ``liked_by`` if present, add them otherwise.

    Each branch is one guarded UPDATE, so two concurrent toggles by different
    users never lose each other's change and a user can't appear twice.

    Args:
        session: Database session
        table: Table with ``id`` and ``liked_by`` columns
        row_id: Row to toggle
        user_id: Liking user
        visible: Extra predicate the row must satisfy (e.g. not soft-deleted)

    Returns:
        New like state, or None if no visible row has this ID
    """
    liked_by = table.c.liked_by
    member = literal(user_id, PG_UUID(as_uuid=True))
    row_filter = table.c.id == row_id
    if visible is not None:
        row_filter = row_filter & visible

    removed = await session.execute(
        table.update()
        .where(row_filter, member == any_(liked_by))
        .values(liked_by=func.array_remove(liked_by, member))
        .returning(liked_by)
    )
    row = removed.fetchone()
    if row is not None:
        await session.flush()
        return LikeResult(liked=False, like_count=len(row.liked_by))

    added = await session.execute(
        table.update()
        .where(row_filter, not_(member == any_(liked_by)))
        .values(liked_by=func.array_append(liked_by, member))
        .returning(liked_by)
    )
    row = added.fetchone()
    if row is not None:
        await session.flush()
        return LikeResult(liked=True, like_count=len(row.liked_by))

    # Neither update matched: the row is gone, or a concurrent toggle by the
    # same user flipped it between the two statements
    current = await session.execute(select(liked_by).where(row_filter))
    row = current.fetchone()
    if row is None:
        return None
    liked = user_id in (row.liked_by or [])
    return LikeResult(liked=liked, like_count=len(row.liked_by or []))
