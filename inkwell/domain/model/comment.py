"""Comment entity.

Comments are either roots (posted directly on a post) or replies to a root.
Only one level of nesting exists.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import CommentId, PostId, UserId, Username

COMMENT_MAX_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id``: None for a root comment,
    otherwise the id of the root comment being replied to.

    Deletion is soft: ``is_deleted`` hides the comment from every read while
    the row stays in place, so replies keep a valid parent reference.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    liked_by: frozenset[UserId] = frozenset()
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def like_count(self) -> int:
        return len(self.liked_by)
