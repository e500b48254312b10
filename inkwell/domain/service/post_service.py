"""Post domain service."""

import math
import re
import unicodedata
from dataclasses import dataclass
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from inkwell.domain.model.common import utcnow
from inkwell.domain.model.post import POST_TITLE_MAX_LENGTH, Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import LikeResult, PostId, Slug, UserId, Username
from inkwell.domain.value.types import SLUG_MAX_LENGTH

from .base import Service


@dataclass
class PostPage:
    """A page of posts plus the total number of posts."""

    items: list[Post]
    total: int


@dataclass
class PostSearchResult:
    """Search results with pagination metadata."""

    posts: list[Post]
    total_posts: int
    total_pages: int
    current_page: int


def slugify(title: str, post_id: UUID | None = None) -> str:
    """Convert a title to URL-safe slug format.

    - Folds accented characters to ASCII and drops anything else non-ASCII
    - Converts to lowercase
    - Replaces runs of non-alphanumeric chars with a single hyphen
    - Truncates to 100 characters and strips leading/trailing hyphens

    A title with no usable characters falls back to ``post-<8 hex of id>``
    when a post ID is given, and to an empty string otherwise.
    """
    ascii_title = (
        unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_title.lower())
    slug = slug.strip("-")[:SLUG_MAX_LENGTH].strip("-")
    if not slug and post_id is not None:
        return f"post-{post_id.hex[:8]}"
    return slug


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    @staticmethod
    def _clean_title(title: str | None) -> str:
        cleaned = (title or "").strip()
        if not cleaned:
            raise ValidationError("Title and content are required.")
        if len(cleaned) > POST_TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title must be at most {POST_TITLE_MAX_LENGTH} characters."
            )
        return cleaned

    @staticmethod
    def _clean_content(content: str | None) -> str:
        if not content or not content.strip():
            raise ValidationError("Title and content are required.")
        return content

    @staticmethod
    def _clean_tags(tags: list[str] | None) -> list[str]:
        return [tag.strip() for tag in tags or [] if tag.strip()]

    async def _get_by_slug(self, slug: str) -> Post:
        try:
            slug_value = Slug(slug)
        except PydanticValidationError:
            raise NotFoundError("Post", slug) from None

        post = await self.post_repository.find_by_slug(slug_value)
        if post is None:
            logfire.warn("Post not found by slug", slug=slug)
            raise NotFoundError("Post", slug)
        return post

    async def _get_owned(self, slug: str, requester_id: UserId) -> Post:
        post = await self._get_by_slug(slug)
        if post.author_id != requester_id:
            logfire.warn(
                "Post ownership check failed",
                post_id=str(post.id),
                requester_id=str(requester_id),
            )
            raise ForbiddenError("post", str(post.id), str(requester_id))
        return post

    async def create_post(
        self,
        author_id: UserId,
        author_username: Username,
        title: str,
        content: str,
        tags: list[str] | None = None,
    ) -> Post:
        """Create a post with a slug derived from its title.

        Raises:
            ValidationError: If title or content is missing or invalid
            ConflictError: If another post already has the same slug
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            title = self._clean_title(title)
            content = self._clean_content(content)

            post_id = PostId(uuid4())
            slug = Slug(slugify(title, post_id))

            if await self.post_repository.find_by_slug(slug) is not None:
                logfire.warn("Slug already taken", slug=str(slug))
                raise ConflictError("A post with the same title already exists.")

            now = utcnow()
            post = Post(
                id=post_id,
                title=title,
                content=content,
                tags=self._clean_tags(tags),
                slug=slug,
                author_id=author_id,
                author_username=author_username,
                views=0,
                liked_by=frozenset(),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.post_repository.save(post)
            except IntegrityError:
                # Another request took the slug after the check above
                logfire.warn("Slug taken concurrently", slug=str(slug))
                raise ConflictError("A post with the same title already exists.")
            logfire.info("Post created", post_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def list_posts(self, page: int, limit: int) -> PostPage:
        """List posts newest first."""
        offset = self.page_offset(page, limit)
        with logfire.span("post_service.list_posts", page=page, limit=limit):
            items = await self.post_repository.find_all(limit=limit, offset=offset)
            total = await self.post_repository.count()
            logfire.info("Posts listed", count=len(items), total=total)
            return PostPage(items=items, total=total)

    async def view_post(self, slug: str) -> Post:
        """Fetch a post by slug and count the view.

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("post_service.view_post", slug=slug):
            post = await self._get_by_slug(slug)
            viewed = await self.post_repository.increment_views(post.id)
            if viewed is None:
                # Deleted between lookup and increment
                raise NotFoundError("Post", slug)
            logfire.info("Post viewed", post_id=str(post.id), views=viewed.views)
            return viewed

    async def update_post(
        self,
        slug: str,
        requester_id: UserId,
        title: str | None = None,
        content: str | None = None,
        tags: list[str] | None = None,
    ) -> Post:
        """Update a post. Only the author may do this.

        A new title regenerates the slug. The new slug only conflicts when a
        different post already owns it.

        Raises:
            NotFoundError: If no post has this slug
            ForbiddenError: If the requester is not the author
            ValidationError: If a provided field is invalid
            ConflictError: If the new slug belongs to another post
        """
        with logfire.span(
            "post_service.update_post", slug=slug, requester_id=str(requester_id)
        ):
            post = await self._get_owned(slug, requester_id)
            changes: dict = {}

            if title:
                new_title = self._clean_title(title)
                new_slug = Slug(slugify(new_title, post.id))
                if new_slug != post.slug:
                    existing = await self.post_repository.find_by_slug(new_slug)
                    if existing is not None and existing.id != post.id:
                        logfire.warn(
                            "Slug conflict on title update",
                            post_id=str(post.id),
                            slug=str(new_slug),
                        )
                        raise ConflictError(
                            "A post with the new title already exists."
                        )
                    changes["slug"] = new_slug
                changes["title"] = new_title

            if content:
                changes["content"] = self._clean_content(content)
            if tags is not None:
                changes["tags"] = self._clean_tags(tags)

            changes["updated_at"] = utcnow()
            updated = post.model_copy(update=changes)
            try:
                saved = await self.post_repository.save(updated)
            except IntegrityError:
                logfire.warn(
                    "Slug taken concurrently",
                    post_id=str(post.id),
                    slug=str(updated.slug),
                )
                raise ConflictError("A post with the new title already exists.")
            logfire.info(
                "Post updated",
                post_id=str(saved.id),
                slug=str(saved.slug),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete_post(self, slug: str, requester_id: UserId) -> None:
        """Permanently delete a post. Only the author may do this.

        Raises:
            NotFoundError: If no post has this slug
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "post_service.delete_post", slug=slug, requester_id=str(requester_id)
        ):
            post = await self._get_owned(slug, requester_id)
            await self.post_repository.delete(post.id)
            logfire.info("Post deleted", post_id=str(post.id), slug=slug)

    async def toggle_like(self, slug: str, user_id: UserId) -> tuple[Post, LikeResult]:
        """Like the post if the user hasn't yet, unlike it otherwise.

        Returns:
            The post after the toggle and the new like state

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("post_service.toggle_like", slug=slug, user_id=str(user_id)):
            post = await self._get_by_slug(slug)
            result = await self.post_repository.toggle_like(post.id, user_id)
            if result is None:
                raise NotFoundError("Post", slug)
            refreshed = await self.post_repository.find_by_id(post.id) or post
            logfire.info(
                "Post like toggled",
                post_id=str(post.id),
                liked=result.liked,
                like_count=result.like_count,
            )
            return refreshed, result

    async def search_posts(
        self, query: str | None, page: int, limit: int
    ) -> PostSearchResult:
        """Search posts by any term in title or content.

        Raises:
            ValidationError: If the query is blank or page/limit not positive
        """
        if not query or not query.strip():
            raise ValidationError("Search query is required.")
        offset = self.page_offset(page, limit)
        terms = query.split()

        with logfire.span(
            "post_service.search_posts", query=query, page=page, limit=limit
        ):
            posts = await self.post_repository.search(
                terms, limit=limit, offset=offset
            )
            total = await self.post_repository.count_search(terms)
            logfire.info("Posts searched", query=query, count=len(posts), total=total)
            return PostSearchResult(
                posts=posts,
                total_posts=total,
                total_pages=math.ceil(total / limit),
                current_page=page,
            )
