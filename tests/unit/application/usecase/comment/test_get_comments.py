"""Unit tests for the comment read use cases."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.comment.get_comment import (
    GetCommentRequest,
    GetCommentUseCase,
)
from inkwell.application.usecase.comment.get_comments import (
    COMMENTS_FETCHED_MESSAGE,
    NO_COMMENTS_MESSAGE,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import CommentRepository, PostRepository
from tests.conftest import at, make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_empty_post_message(self, unit_env):
        """A post without comments gets the empty message and an empty page."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post())

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        # Assert
        assert response.message == NO_COMMENTS_MESSAGE
        assert response.total == 0
        assert response.comments == []
        assert response.page == 1
        assert response.limit == 10

    @pytest.mark.asyncio
    async def test_nested_page_serializes_replies(self, unit_env):
        """Nested pages carry replies; the envelope message is not in the data."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))
        await comment_repo.save(make_comment(post.id, at(2), parent_id=root.id))

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), limit=5)
        )
        data = response.model_dump(mode="json", exclude_unset=True)

        # Assert
        assert response.message == COMMENTS_FETCHED_MESSAGE
        assert "message" not in data
        assert data["limit"] == 5
        assert data["comments"][0]["total_replies"] == 1
        assert data["comments"][0]["replies"][0]["parent_id"] == str(root.id)

    @pytest.mark.asyncio
    async def test_flat_page_omits_reply_fields(self, unit_env):
        """With nested off, reply fields are absent from the serialized items."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentsUseCase)
        post = await post_repo.save(make_post())
        await comment_repo.save(make_comment(post.id, at(1)))

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), nested=False)
        )
        item = response.model_dump(mode="json", exclude_unset=True)["comments"][0]

        # Assert
        assert "replies" not in item
        assert "total_replies" not in item

    @pytest.mark.asyncio
    async def test_missing_post_id_rejected(self, unit_env):
        """A post ID is required."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Post ID is required"):
            await use_case.execute(GetCommentsRequest())

    @pytest.mark.asyncio
    async def test_limit_above_maximum_rejected(self, unit_env):
        """Page size is capped."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="at most 100"):
            await use_case.execute(
                GetCommentsRequest(post_id=str(uuid4()), limit=101)
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_not_found(self, unit_env):
        """An ID that isn't a UUID can't name a post."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id="not-a-uuid"))


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_single_comment_without_replies(self, unit_env):
        """A lone comment reports it has no replies yet."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetCommentUseCase)
        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))

        # Act
        item = await use_case.execute(GetCommentRequest(comment_id=str(root.id)))

        # Assert
        assert item.id == str(root.id)
        assert item.replies == []
        assert item.total_replies == 0
        assert item.replies_message.startswith("No replies yet")
