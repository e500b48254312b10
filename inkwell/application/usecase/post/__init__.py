"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .items import PostItem
from .like_post import LikePostRequest, LikePostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .search_posts import SearchPostsRequest, SearchPostsResponse, SearchPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
