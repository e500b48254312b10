"""Get comments use case."""

from inkwell.config import PaginationSettings
from inkwell.domain.error import ValidationError
from inkwell.domain.service import ThreadService
from inkwell.domain.value import PostId

from ..base import BaseUseCase, PageRequest, parse_id
from .items import ThreadPageResponse

NO_COMMENTS_MESSAGE = "No comments yet for this post"
COMMENTS_FETCHED_MESSAGE = "Comments fetched successfully"


class GetCommentsRequest(PageRequest):
    """Get comments request."""

    post_id: str | None = None  # UUID string
    nested: bool = True


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting one page of a post's comment threads."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Thread assembly domain service
            pagination: Pagination settings
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> ThreadPageResponse:
        """Execute get comments flow.

        Root comments come newest first; with ``nested`` each carries its
        replies oldest first. An unknown post simply has no comments.

        Raises:
            ValidationError: If the post ID is missing or page/limit out of range
        """
        if not request.post_id:
            raise ValidationError("Post ID is required.")
        limit = request.resolve_limit(self.pagination)
        page = await self.thread_service.assemble(
            post_id=PostId(parse_id(request.post_id, "Post")),
            page=request.page,
            limit=limit,
            include_nested=request.nested,
        )
        message = NO_COMMENTS_MESSAGE if page.total == 0 else COMMENTS_FETCHED_MESSAGE
        return ThreadPageResponse.from_page(page, message)
