"""Post routes.

``/posts/search`` is declared before ``/posts/{slug}`` so the literal path wins.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from inkwell.interface.api.auth import require_user
from inkwell.interface.api.response import success

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str | None = None
    content: str | None = None
    tags: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


@router.post("")
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Create a post. Requires authentication."""
    user = await require_user(authorization, get_current_user)
    post = await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title or "",
            content=request.content or "",
            tags=request.tags,
            author_id=user.id,
            author_username=user.username,
        )
    )
    return success(
        "Post created successfully", post, status_code=status.HTTP_201_CREATED
    )


@router.get("")
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(1),
    limit: int | None = Query(None),
) -> JSONResponse:
    """List posts newest first."""
    response = await list_posts_use_case.execute(
        ListPostsRequest(page=page, limit=limit)
    )
    return success("Posts fetched successfully", response)


@router.get("/search")
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    query: str | None = Query(None),
    page: int = Query(1),
    limit: int | None = Query(None),
) -> JSONResponse:
    """Search posts whose title or content contains any query term.

    Example:
        GET /posts/search?query=async+python&page=1&limit=10
    """
    response = await search_posts_use_case.execute(
        SearchPostsRequest(query=query, page=page, limit=limit)
    )
    return success("Search results fetched successfully", response)


@router.get("/{slug}")
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> JSONResponse:
    """Get a post by slug. Counts as a view."""
    post = await get_post_use_case.execute(GetPostRequest(slug=slug))
    return success("Post retrieved", post)


@router.put("/{slug}")
async def update_post(
    slug: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Update a post. Only the author can do this."""
    user = await require_user(authorization, get_current_user)
    post = await update_post_use_case.execute(
        UpdatePostRequest(
            slug=slug,
            user_id=user.id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )
    return success("Post updated", post)


@router.delete("/{slug}")
async def delete_post(
    slug: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Delete a post and its comments. Only the author can do this."""
    user = await require_user(authorization, get_current_user)
    await delete_post_use_case.execute(DeletePostRequest(slug=slug, user_id=user.id))
    return success("Post deleted")


@router.patch("/{slug}/like")
async def like_post(
    slug: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Like the post, or unlike it if the caller already liked it."""
    user = await require_user(authorization, get_current_user)
    response = await like_post_use_case.execute(
        LikePostRequest(slug=slug, user_id=user.id)
    )
    return success(response.message, response)
