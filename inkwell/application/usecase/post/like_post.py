"""Toggle post like use case."""

from pydantic import BaseModel

from inkwell.domain.service import PostService
from inkwell.domain.value import UserId

from ..base import BaseUseCase, parse_id
from ..comment.like_comment import LikeResponse


class LikePostRequest(BaseModel):
    """Like post request."""

    slug: str
    user_id: str  # User ID from authenticated user


class LikePostUseCase(BaseUseCase):
    """Use case for liking or unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If no post has this slug
        """
        _, result = await self.post_service.toggle_like(
            slug=request.slug,
            user_id=UserId(parse_id(request.user_id, "User")),
        )
        return LikeResponse(
            message="Post liked" if result.liked else "Post unliked",
            liked=result.liked,
            like_count=result.like_count,
        )
