"""Get the caller's own comments use case."""

from inkwell.config import PaginationSettings
from inkwell.domain.service import ThreadService
from inkwell.domain.value import UserId

from ..base import BaseUseCase, PageRequest, parse_id
from .items import ThreadPageResponse

NO_USER_COMMENTS_MESSAGE = "You have not made any comments yet"
USER_COMMENTS_FETCHED_MESSAGE = "User comments fetched successfully"


class GetMyCommentsRequest(PageRequest):
    """Get my comments request."""

    author_id: str  # User ID from authenticated user


class GetMyCommentsUseCase(BaseUseCase):
    """Use case for getting a user's root comments with their replies."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize get my comments use case.

        Args:
            thread_service: Thread assembly domain service
            pagination: Pagination settings
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: GetMyCommentsRequest) -> ThreadPageResponse:
        """Execute get my comments flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = request.resolve_limit(self.pagination)
        page = await self.thread_service.assemble_for_author(
            author_id=UserId(parse_id(request.author_id, "User")),
            page=request.page,
            limit=limit,
        )
        message = (
            NO_USER_COMMENTS_MESSAGE if page.total == 0 else USER_COMMENTS_FETCHED_MESSAGE
        )
        return ThreadPageResponse.from_page(page, message)
