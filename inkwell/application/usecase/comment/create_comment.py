"""Create comment use case."""

from pydantic import BaseModel

from inkwell.domain.error import ValidationError
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, PostId, UserId, Username

from ..base import BaseUseCase, parse_id
from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str | None = None  # UUID string
    content: str | None = None
    author_id: str  # User ID from authenticated user
    author_username: str  # Username from authenticated user
    parent_id: str | None = None  # Root comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to a root comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValidationError: If content or post ID is missing, or the parent
                can't be replied to
            NotFoundError: If the post or parent comment doesn't exist
        """
        if not request.post_id:
            raise ValidationError("Post ID is required.")
        post_id = PostId(parse_id(request.post_id, "Post"))
        parent_id = (
            CommentId(parse_id(request.parent_id, "Parent comment"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(parse_id(request.author_id, "User")),
            author_username=Username(request.author_username),
            content=request.content,
            parent_id=parent_id,
        )
        return CommentItem.from_comment(comment)
