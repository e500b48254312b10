"""Update comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, UserId

from ..base import BaseUseCase, parse_id
from .items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
            ForbiddenError: If the user is not the author
            ValidationError: If the new content is invalid
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            requester_id=UserId(parse_id(request.user_id, "User")),
            content=request.content,
        )
        return CommentItem.from_comment(comment)
