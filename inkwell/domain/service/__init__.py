"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentPage, CommentService
from .jwt_service import JWTService
from .post_service import PostPage, PostSearchResult, PostService, slugify
from .thread_service import CommentThread, ThreadPage, ThreadService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentPage",
    "CommentService",
    "CommentThread",
    "JWTService",
    "PostPage",
    "PostSearchResult",
    "PostService",
    "Service",
    "ThreadPage",
    "ThreadService",
    "UserService",
    "slugify",
]
