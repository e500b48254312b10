"""Delete comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, UserId

from ..base import BaseUseCase, parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment. Its replies stay visible."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            ForbiddenError: If the user is not the author
        """
        await self.comment_service.soft_delete(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            requester_id=UserId(parse_id(request.user_id, "User")),
        )
