"""Unit tests for ThreadService."""

import pytest

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.service import CommentService, ThreadService
from inkwell.domain.service.thread_service import NO_REPLIES_MESSAGE
from inkwell.domain.value import UserId
from tests.conftest import at, make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestThreadAssembly:
    """Tests for paginated thread assembly."""

    @pytest.mark.asyncio
    async def test_roots_newest_first_replies_oldest_first(self, unit_env):
        """Roots come newest first and each carries its replies oldest first."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        r1 = await comment_repo.save(make_comment(post.id, at(10)))
        r2 = await comment_repo.save(make_comment(post.id, at(20)))
        a = await comment_repo.save(make_comment(post.id, at(11), parent_id=r1.id))
        b = await comment_repo.save(make_comment(post.id, at(12), parent_id=r1.id))
        c = await comment_repo.save(make_comment(post.id, at(21), parent_id=r2.id))

        # Act
        page = await thread_service.assemble(post.id, page=1, limit=10)

        # Assert
        assert page.total == 2
        assert [t.comment.id for t in page.comments] == [r2.id, r1.id]
        assert [r.id for r in page.comments[0].replies] == [c.id]
        assert page.comments[0].total_replies == 1
        assert [r.id for r in page.comments[1].replies] == [a.id, b.id]
        assert page.comments[1].total_replies == 2

    @pytest.mark.asyncio
    async def test_no_comments_skips_reply_lookup(self, unit_env, monkeypatch):
        """A post without comments returns an empty page without fetching replies."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        thread_service = await unit_env.get(ThreadService)
        post = await post_repo.save(make_post())

        calls = []

        async def spy(self, parent_ids):
            calls.append(parent_ids)
            return []

        monkeypatch.setattr(CommentService, "find_replies_by_parents", spy)

        # Act
        page = await thread_service.assemble(post.id, page=1, limit=10)

        # Assert
        assert page.total == 0
        assert page.comments == []
        assert calls == []

    @pytest.mark.asyncio
    async def test_without_nesting_replies_are_not_attached(self, unit_env):
        """With nesting off, roots carry no reply fields at all."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))
        await comment_repo.save(make_comment(post.id, at(2), parent_id=root.id))

        # Act
        page = await thread_service.assemble(
            post.id, page=1, limit=10, include_nested=False
        )

        # Assert
        assert page.total == 1
        assert page.comments[0].comment.id == root.id
        assert page.comments[0].replies is None
        assert page.comments[0].total_replies is None

    @pytest.mark.asyncio
    async def test_second_page_holds_remaining_roots(self, unit_env):
        """Fifteen roots with limit 10 leave five on page 2; total stays 15."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        roots = [
            await comment_repo.save(make_comment(post.id, at(i))) for i in range(15)
        ]

        # Act
        first = await thread_service.assemble(post.id, page=1, limit=10)
        second = await thread_service.assemble(post.id, page=2, limit=10)

        # Assert
        assert len(first.comments) == 10
        assert len(second.comments) == 5
        assert first.total == second.total == 15
        # Oldest five roots land on the last page
        assert {t.comment.id for t in second.comments} == {r.id for r in roots[:5]}

    @pytest.mark.asyncio
    async def test_replies_only_counted_under_their_root(self, unit_env):
        """Replies never count as roots and never show up at the top level."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))
        for i in range(3):
            await comment_repo.save(
                make_comment(post.id, at(2 + i), parent_id=root.id)
            )

        # Act
        page = await thread_service.assemble(post.id, page=1, limit=10)

        # Assert
        assert page.total == 1
        assert len(page.comments) == 1
        assert page.comments[0].total_replies == 3

    @pytest.mark.asyncio
    async def test_non_positive_page_rejected(self, unit_env):
        """Page numbers start at 1."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        thread_service = await unit_env.get(ThreadService)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ValidationError, match="positive"):
            await thread_service.assemble(post.id, page=0, limit=10)

    @pytest.mark.asyncio
    async def test_author_threads_only_include_own_roots(self, unit_env):
        """A user's comment page holds their root comments with all replies."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        mine = await comment_repo.save(make_comment(post.id, at(1)))
        await comment_repo.save(make_comment(post.id, at(2)))
        reply = await comment_repo.save(
            make_comment(post.id, at(3), parent_id=mine.id)
        )

        # Act
        page = await thread_service.assemble_for_author(
            UserId(mine.author_id), page=1, limit=10
        )

        # Assert
        assert page.total == 1
        assert page.comments[0].comment.id == mine.id
        assert [r.id for r in page.comments[0].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_author_threads_skip_deleted_roots(self, unit_env):
        """A soft-deleted root drops out of its author's comment page."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        kept = await comment_repo.save(make_comment(post.id, at(1)))
        author_id = UserId(kept.author_id)
        deleted = await comment_repo.save(
            make_comment(post.id, at(2), author_id=author_id)
        )
        await comment_repo.save(make_comment(post.id, at(3), parent_id=deleted.id))
        await comment_repo.soft_delete(deleted.id)

        # Act
        page = await thread_service.assemble_for_author(author_id, page=1, limit=10)

        # Assert
        assert page.total == 1
        assert [t.comment.id for t in page.comments] == [kept.id]
        assert page.comments[0].replies == []

    @pytest.mark.asyncio
    async def test_equal_timestamps_page_without_overlap(self, unit_env):
        """Roots created at the same instant still split cleanly across pages."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        roots = [
            await comment_repo.save(make_comment(post.id, at(0))) for _ in range(6)
        ]

        # Act
        first = await thread_service.assemble(post.id, page=1, limit=3)
        second = await thread_service.assemble(post.id, page=2, limit=3)

        # Assert
        first_ids = [t.comment.id for t in first.comments]
        second_ids = [t.comment.id for t in second.comments]
        assert set(first_ids).isdisjoint(second_ids)
        assert set(first_ids) | set(second_ids) == {r.id for r in roots}
        assert first_ids + second_ids == sorted(
            (r.id for r in roots), reverse=True
        )


class TestSingleThread:
    """Tests for fetching one comment with its replies."""

    @pytest.mark.asyncio
    async def test_comment_without_replies_carries_message(self, unit_env):
        """A comment with no replies gets the no-replies message."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))

        # Act
        thread = await thread_service.get_thread(root.id)

        # Assert
        assert thread.replies == []
        assert thread.total_replies == 0
        assert thread.replies_message == NO_REPLIES_MESSAGE

    @pytest.mark.asyncio
    async def test_comment_with_replies_has_no_message(self, unit_env):
        """Replies are attached oldest first and no message is set."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))
        later = await comment_repo.save(
            make_comment(post.id, at(5), parent_id=root.id)
        )
        earlier = await comment_repo.save(
            make_comment(post.id, at(3), parent_id=root.id)
        )

        # Act
        thread = await thread_service.get_thread(root.id)

        # Assert
        assert [r.id for r in thread.replies] == [earlier.id, later.id]
        assert thread.total_replies == 2
        assert thread.replies_message is None

    @pytest.mark.asyncio
    async def test_deleted_comment_not_found(self, unit_env):
        """A soft-deleted comment can't be fetched as a thread."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread_service = await unit_env.get(ThreadService)

        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, at(1)))
        await comment_repo.soft_delete(root.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await thread_service.get_thread(root.id)
