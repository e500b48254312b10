"""Post response items shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model import Post


class PostItem(BaseModel):
    """Post item in response."""

    id: str
    title: str
    content: str
    tags: list[str]
    slug: str
    author_id: str
    author_username: str
    views: int
    like_count: int
    liked_by: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            tags=list(post.tags),
            slug=str(post.slug),
            author_id=str(post.author_id),
            author_username=str(post.author_username),
            views=post.views,
            like_count=post.like_count,
            liked_by=sorted(str(u) for u in post.liked_by),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
