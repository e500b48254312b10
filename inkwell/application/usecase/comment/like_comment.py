"""Toggle comment like use case."""

from pydantic import BaseModel, Field

from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, UserId

from ..base import BaseUseCase, parse_id


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeResponse(BaseModel):
    """Like state after a toggle."""

    message: str = Field(exclude=True)  # Envelope message, not part of data
    liked: bool
    like_count: int


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        result = await self.comment_service.toggle_like(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            user_id=UserId(parse_id(request.user_id, "User")),
        )
        return LikeResponse(
            message="Comment liked" if result.liked else "Comment unliked",
            liked=result.liked,
            like_count=result.like_count,
        )
