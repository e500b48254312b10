"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .get_my_comments import GetMyCommentsRequest, GetMyCommentsUseCase
from .items import CommentItem, ThreadItem, ThreadPageResponse
from .like_comment import LikeCommentRequest, LikeCommentUseCase, LikeResponse
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "GetMyCommentsRequest",
    "GetMyCommentsUseCase",
    "LikeCommentRequest",
    "LikeCommentUseCase",
    "LikeResponse",
    "ThreadItem",
    "ThreadPageResponse",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
