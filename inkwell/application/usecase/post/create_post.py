"""Create post use case."""

from pydantic import BaseModel, Field

from inkwell.domain.service import PostService
from inkwell.domain.value import UserId, Username

from ..base import BaseUseCase, parse_id
from .items import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    author_id: str  # User ID from authenticated user
    author_username: str  # Username from authenticated user


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Raises:
            ValidationError: If title or content is missing or invalid
            ConflictError: If a post with the same slug exists
        """
        post = await self.post_service.create_post(
            author_id=UserId(parse_id(request.author_id, "User")),
            author_username=Username(request.author_username),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return PostItem.from_post(post)
