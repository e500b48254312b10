"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import PostId, Slug, UserId, Username

POST_TITLE_MAX_LENGTH = 150


class Post(DomainModel):
    """Post aggregate root.

    The slug is derived from the title and is unique across all posts.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=POST_TITLE_MAX_LENGTH)
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    slug: Slug
    author_id: UserId
    author_username: Username
    views: int = Field(default=0, ge=0)
    liked_by: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def like_count(self) -> int:
        return len(self.liked_by)
