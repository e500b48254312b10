"""Search posts use case."""

from pydantic import BaseModel

from inkwell.config import PaginationSettings
from inkwell.domain.service import PostService

from ..base import BaseUseCase, PageRequest
from .items import PostItem


class SearchPostsRequest(PageRequest):
    """Search posts request."""

    query: str | None = None


class SearchPostsResponse(BaseModel):
    """Search results with pagination metadata."""

    posts: list[PostItem]
    total_posts: int
    total_pages: int
    current_page: int


class SearchPostsUseCase(BaseUseCase):
    """Use case for searching posts by title and content."""

    def __init__(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> None:
        """Initialize search posts use case.

        Args:
            post_service: Post domain service
            pagination: Pagination settings
        """
        self.post_service = post_service
        self.pagination = pagination

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Raises:
            ValidationError: If the query is blank or page/limit out of range
        """
        limit = request.resolve_limit(self.pagination)
        result = await self.post_service.search_posts(
            query=request.query, page=request.page, limit=limit
        )
        return SearchPostsResponse(
            posts=[PostItem.from_post(p) for p in result.posts],
            total_posts=result.total_posts,
            total_pages=result.total_pages,
            current_page=result.current_page,
        )
