"""Get post use case."""

from pydantic import BaseModel

from inkwell.domain.service import PostService

from ..base import BaseUseCase
from .items import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostUseCase(BaseUseCase):
    """Use case for reading a post by slug. Each read counts as a view."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If no post has this slug
        """
        post = await self.post_service.view_post(request.slug)
        return PostItem.from_post(post)
