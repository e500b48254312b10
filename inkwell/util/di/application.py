"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetMyCommentsUseCase,
    LikeCommentUseCase,
    UpdateCommentUseCase,
)
from inkwell.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    SearchPostsUseCase,
    UpdatePostUseCase,
)
from inkwell.config import PaginationSettings
from inkwell.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PostService,
    ThreadService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_comments_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(thread_service=thread_service, pagination=pagination)

    @provide
    def get_comment_use_case(self, thread_service: ThreadService) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(thread_service=thread_service)

    @provide
    def get_my_comments_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> GetMyCommentsUseCase:
        """Provide get my comments use case."""
        return GetMyCommentsUseCase(
            thread_service=thread_service, pagination=pagination
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, pagination=pagination)

    @provide
    def get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide
    def get_search_posts_use_case(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(post_service=post_service, pagination=pagination)
