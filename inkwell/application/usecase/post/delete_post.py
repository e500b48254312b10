"""Delete post use case."""

from pydantic import BaseModel

from inkwell.domain.service import PostService
from inkwell.domain.value import UserId

from ..base import BaseUseCase, parse_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str
    user_id: str  # User ID from authenticated user


class DeletePostUseCase(BaseUseCase):
    """Use case for permanently deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If no post has this slug
            ForbiddenError: If the user is not the author
        """
        await self.post_service.delete_post(
            slug=request.slug,
            requester_id=UserId(parse_id(request.user_id, "User")),
        )
