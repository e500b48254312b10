"""Get single comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import ThreadService
from inkwell.domain.value import CommentId

from ..base import BaseUseCase, parse_id
from .items import ThreadItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase(BaseUseCase):
    """Use case for getting one comment with its replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetCommentRequest) -> ThreadItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        thread = await self.thread_service.get_thread(
            CommentId(parse_id(request.comment_id, "Comment"))
        )
        return ThreadItem.from_thread(thread)
