"""PostgreSQL implementation of Post repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import ColumnElement, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import LikeResult, PostId, Slug, UserId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.repository.likes import toggle_like
from inkwell.persistence.tables import posts_table


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _matches_any(terms: Sequence[str]) -> ColumnElement[bool]:
    """Case-insensitive match of any term in title or content."""
    clauses = []
    for term in terms:
        pattern = f"%{_escape_like(term)}%"
        clauses.append(posts_table.c.title.ilike(pattern, escape="\\"))
        clauses.append(posts_table.c.content.ilike(pattern, escape="\\"))
    return or_(*clauses)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Post]:
        """Find posts newest first."""
        stmt = (
            select(posts_table)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def search(
        self, terms: Sequence[str], limit: int = 10, offset: int = 0
    ) -> List[Post]:
        """Find posts matching any term, newest first."""
        with logfire.span("post_repository.search", terms=list(terms)):
            stmt = (
                select(posts_table)
                .where(_matches_any(terms))
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count_search(self, terms: Sequence[str]) -> int:
        """Count posts matching any term."""
        stmt = select(func.count()).select_from(posts_table).where(_matches_any(terms))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            existing = await self.find_by_id(post.id)

            if existing:
                # views and liked_by are only changed by their atomic updates
                post_dict.pop("views")
                post_dict.pop("liked_by")
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)
                await self.session.flush()
                return await self.find_by_id(post.id) or post

            logfire.info("Inserting new post", post_id=str(post.id), slug=str(post.slug))
            await self.session.execute(posts_table.insert().values(**post_dict))
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete). Its comments go with it."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment views by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_post(dict(row)) if row else None

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeResult]:
        """Toggle the user's like on a post."""
        return await toggle_like(self.session, posts_table, post_id, user_id)
