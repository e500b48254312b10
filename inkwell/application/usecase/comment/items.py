"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from inkwell.domain.model import Comment
from inkwell.domain.service import CommentThread, ThreadPage


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    post_id: str
    author_id: str
    author_username: str
    content: str
    parent_id: str | None
    like_count: int
    liked_by: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_username=str(comment.author_username),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            like_count=comment.like_count,
            liked_by=sorted(str(u) for u in comment.liked_by),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class ThreadItem(CommentItem):
    """Comment with its direct replies.

    The reply fields are only set when replies were assembled, and unset
    fields are left out of the response.
    """

    replies: list[CommentItem] | None = None
    total_replies: int | None = None
    replies_message: str | None = None

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "ThreadItem":
        fields = CommentItem.from_comment(thread.comment).model_dump()
        if thread.replies is not None:
            fields["replies"] = [CommentItem.from_comment(r) for r in thread.replies]
            fields["total_replies"] = thread.total_replies
        if thread.replies_message is not None:
            fields["replies_message"] = thread.replies_message
        return cls(**fields)


class ThreadPageResponse(BaseModel):
    """Page of comment threads."""

    message: str = Field(exclude=True)  # Envelope message, not part of data
    total: int
    page: int
    limit: int
    comments: list[ThreadItem]

    @classmethod
    def from_page(cls, page: ThreadPage, message: str) -> "ThreadPageResponse":
        return cls(
            message=message,
            total=page.total,
            page=page.page,
            limit=page.limit,
            comments=[ThreadItem.from_thread(t) for t in page.comments],
        )
