"""Comment routes.

``/comments/my-comments`` is declared before ``/comments/{comment_id}`` so the
literal path wins.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetMyCommentsRequest,
    GetMyCommentsUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from inkwell.interface.api.auth import require_user
from inkwell.interface.api.response import success

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment. Accepts camelCase or snake_case."""

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    post_id: str | None = Field(default=None, alias="postId")
    parent_id: str | None = Field(default=None, alias="parentId")


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str | None = None


@router.post("")
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Comment on a post, or reply to a root comment when ``parentId`` is set.

    Example:
        POST /comments
        {"content": "Nice post", "postId": "...", "parentId": null}
    """
    user = await require_user(authorization, get_current_user)
    comment = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=request.post_id,
            content=request.content,
            author_id=user.id,
            author_username=user.username,
            parent_id=request.parent_id,
        )
    )
    return success(
        "Comment added successfully", comment, status_code=status.HTTP_201_CREATED
    )


@router.get("")
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post_id: str | None = Query(None, alias="postId"),
    page: int = Query(1),
    limit: int | None = Query(None),
    nested: bool = Query(True),
) -> JSONResponse:
    """List a post's root comments newest first, with replies unless nested=false."""
    response = await get_comments_use_case.execute(
        GetCommentsRequest(post_id=post_id, page=page, limit=limit, nested=nested)
    )
    return success(response.message, response)


@router.get("/my-comments")
async def get_my_comments(
    get_my_comments_use_case: FromDishka[GetMyCommentsUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    page: int = Query(1),
    limit: int | None = Query(None),
) -> JSONResponse:
    """List the caller's root comments with their replies."""
    user = await require_user(authorization, get_current_user)
    response = await get_my_comments_use_case.execute(
        GetMyCommentsRequest(author_id=user.id, page=page, limit=limit)
    )
    return success(response.message, response)


@router.get("/{comment_id}")
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> JSONResponse:
    """Get one comment with its replies."""
    thread = await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id)
    )
    return success("Comments retrieved", thread)


@router.put("/{comment_id}")
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Replace a comment's content. Only the author can do this."""
    user = await require_user(authorization, get_current_user)
    comment = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user.id, content=request.content or ""
        )
    )
    return success("Comment updated", comment)


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Soft-delete a comment. Only the author can do this; replies stay visible."""
    user = await require_user(authorization, get_current_user)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user.id)
    )
    return success("Comment deleted")


@router.patch("/{comment_id}/like")
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Like the comment, or unlike it if the caller already liked it."""
    user = await require_user(authorization, get_current_user)
    response = await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id, user_id=user.id)
    )
    return success(response.message, response)
