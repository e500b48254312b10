"""Update post use case."""

from pydantic import BaseModel

from inkwell.domain.service import PostService
from inkwell.domain.value import UserId

from ..base import BaseUseCase, parse_id
from .items import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields keep their current value."""

    slug: str
    user_id: str  # User ID from authenticated user
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for updating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            NotFoundError: If no post has this slug
            ForbiddenError: If the user is not the author
            ValidationError: If a provided field is invalid
            ConflictError: If the new title's slug belongs to another post
        """
        post = await self.post_service.update_post(
            slug=request.slug,
            requester_id=UserId(parse_id(request.user_id, "User")),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return PostItem.from_post(post)
