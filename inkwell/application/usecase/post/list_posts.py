"""List posts use case."""

from pydantic import BaseModel

from inkwell.config import PaginationSettings
from inkwell.domain.service import PostService

from ..base import BaseUseCase, PageRequest
from .items import PostItem


class ListPostsRequest(PageRequest):
    """List posts request."""


class ListPostsResponse(BaseModel):
    """Page of posts, newest first."""

    total: int
    page: int
    limit: int
    posts: list[PostItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts."""

    def __init__(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            pagination: Pagination settings
        """
        self.post_service = post_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = request.resolve_limit(self.pagination)
        result = await self.post_service.list_posts(page=request.page, limit=limit)
        return ListPostsResponse(
            total=result.total,
            page=request.page,
            limit=limit,
            posts=[PostItem.from_post(p) for p in result.items],
        )
