"""Unit tests for PostService."""

from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import PostService, slugify
from inkwell.domain.value import UserId, Username
from tests.conftest import at, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = Username("writer")


class TestSlugify:
    """Tests for slug generation."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Hello World", "hello-world"),
            ("  Notes on  Async   Python!  ", "notes-on-async-python"),
            ("Café Crème", "cafe-creme"),
            ("C++ & Rust: a comparison", "c-rust-a-comparison"),
        ],
    )
    def test_slugify(self, title, expected):
        """Titles become lowercase hyphenated slugs."""
        assert slugify(title) == expected

    def test_slug_is_truncated(self):
        """Slugs are at most 100 characters with no trailing hyphen."""
        slug = slugify("word " * 50)
        assert len(slug) <= 100
        assert not slug.endswith("-")

    def test_title_without_usable_characters_falls_back_to_id(self):
        """A title of only symbols falls back to a slug built from the ID."""
        post_id = UUID("12345678-1234-5678-1234-567812345678")
        assert slugify("!!!", post_id) == "post-12345678"


class TestCreatePost:
    """Tests for creating posts."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env):
        """A new post gets a slug, zero views and no likes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())

        # Act
        post = await post_service.create_post(
            author_id=author_id,
            author_username=AUTHOR,
            title="  Hello World ",
            content="Body",
            tags=["python", "  ", " web "],
        )

        # Assert
        assert post.title == "Hello World"
        assert str(post.slug) == "hello-world"
        assert post.tags == ["python", "web"]
        assert post.views == 0
        assert post.like_count == 0
        assert post.author_id == author_id

    @pytest.mark.asyncio
    async def test_duplicate_title_conflicts(self, unit_env):
        """Two posts can't share a slug."""
        # Arrange
        post_service = await unit_env.get(PostService)
        await post_service.create_post(
            UserId(uuid4()), AUTHOR, "Hello World", "Body"
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await post_service.create_post(
                UserId(uuid4()), AUTHOR, "hello world!", "Other body"
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content", [("", "Body"), ("Title", ""), ("   ", "Body"), ("x" * 151, "Body")]
    )
    async def test_invalid_fields_rejected(self, unit_env, title, content):
        """Title and content are required and titles are length-limited."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await post_service.create_post(UserId(uuid4()), AUTHOR, title, content)


class TestReadPosts:
    """Tests for listing, viewing and searching posts."""

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        """Posts are listed newest first with the overall total."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        old = await post_repo.save(make_post("Old", created_at=at(1)))
        new = await post_repo.save(make_post("New", created_at=at(2)))
        await post_repo.save(make_post("Oldest", created_at=at(0)))

        # Act
        page = await post_service.list_posts(page=1, limit=2)

        # Assert
        assert [p.id for p in page.items] == [new.id, old.id]
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_view_increments_views(self, unit_env):
        """Each view counts once."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post())

        # Act
        await post_service.view_post(str(post.slug))
        viewed = await post_service.view_post(str(post.slug))

        # Assert
        assert viewed.views == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", ["missing-post", "Not A Slug"])
    async def test_view_unknown_slug_not_found(self, unit_env, slug):
        """Unknown and malformed slugs are both not found."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.view_post(slug)

    @pytest.mark.asyncio
    async def test_search_matches_any_term(self, unit_env):
        """Search is case-insensitive over title and content."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        by_title = await post_repo.save(
            make_post("Async Python", created_at=at(2), content="Event loops")
        )
        by_content = await post_repo.save(
            make_post("Weekend", created_at=at(1), content="Baking RUST bread")
        )
        await post_repo.save(make_post("Gardening", created_at=at(3)))

        # Act
        result = await post_service.search_posts("python rust", page=1, limit=1)

        # Assert
        assert result.total_posts == 2
        assert result.total_pages == 2
        assert result.current_page == 1
        assert [p.id for p in result.posts] == [by_title.id]
        second = await post_service.search_posts("python rust", page=2, limit=1)
        assert [p.id for p in second.posts] == [by_content.id]

    @pytest.mark.asyncio
    async def test_blank_search_rejected(self, unit_env):
        """A search needs a query."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(ValidationError, match="query is required"):
            await post_service.search_posts("   ", page=1, limit=10)


class TestUpdateAndDelete:
    """Tests for author-only changes."""

    @pytest.mark.asyncio
    async def test_new_title_regenerates_slug(self, unit_env):
        """Changing the title moves the post to a new slug."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post("Draft Title"))

        # Act
        updated = await post_service.update_post(
            str(post.slug), UserId(post.author_id), title="Final Title"
        )

        # Assert
        assert updated.title == "Final Title"
        assert str(updated.slug) == "final-title"
        assert updated.content == post.content

    @pytest.mark.asyncio
    async def test_same_title_is_not_a_conflict(self, unit_env):
        """A post keeps its own slug when the title doesn't change."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post("Stable Title"))

        # Act
        updated = await post_service.update_post(
            str(post.slug),
            UserId(post.author_id),
            title="Stable Title",
            content="New body",
        )

        # Assert
        assert updated.slug == post.slug
        assert updated.content == "New body"

    @pytest.mark.asyncio
    async def test_title_of_other_post_conflicts(self, unit_env):
        """A post can't take over another post's slug."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        await post_repo.save(make_post("Taken Title"))
        post = await post_repo.save(make_post("Mine"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await post_service.update_post(
                str(post.slug), UserId(post.author_id), title="Taken Title"
            )

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        """Only the author edits a post."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await post_service.update_post(
                str(post.slug), UserId(uuid4()), content="Hijacked"
            )

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, unit_env):
        """A deleted post is gone."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post())

        # Act
        await post_service.delete_post(str(post.slug), UserId(post.author_id))

        # Assert
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Only the author deletes a post."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await post_service.delete_post(str(post.slug), UserId(uuid4()))


class TestToggleLike:
    """Tests for post likes."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_state(self, unit_env):
        """Liking then unliking leaves the post as it was."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        # Act
        liked_post, liked = await post_service.toggle_like(str(post.slug), user_id)
        unliked_post, unliked = await post_service.toggle_like(
            str(post.slug), user_id
        )

        # Assert
        assert liked.liked is True
        assert liked.like_count == 1
        assert user_id in liked_post.liked_by
        assert unliked.liked is False
        assert unliked.like_count == 0
        assert unliked_post.liked_by == frozenset()


class TestConcurrentSlugClaims:
    """A slug taken between the check and the save is still a conflict."""

    @pytest.mark.asyncio
    async def test_duplicate_slug_rejected_by_store(self, unit_env):
        """The repository refuses a second post with the same slug."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Same Title"))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await post_repo.save(make_post("Same Title"))

    @pytest.mark.asyncio
    async def test_create_conflicts_when_save_hits_unique_slug(
        self, unit_env, monkeypatch
    ):
        """A unique violation on insert becomes a ConflictError."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)

        async def taken(post):
            raise IntegrityError("INSERT INTO posts", None, Exception("duplicate"))

        monkeypatch.setattr(post_repo, "save", taken)

        # Act & Assert
        with pytest.raises(ConflictError, match="same title"):
            await post_service.create_post(
                UserId(uuid4()), AUTHOR, "Race Title", "Body"
            )

    @pytest.mark.asyncio
    async def test_update_conflicts_when_save_hits_unique_slug(
        self, unit_env, monkeypatch
    ):
        """A unique violation on retitle becomes a ConflictError."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        post = await post_repo.save(make_post("Original"))

        async def taken(post):
            raise IntegrityError("UPDATE posts", None, Exception("duplicate"))

        monkeypatch.setattr(post_repo, "save", taken)

        # Act & Assert
        with pytest.raises(ConflictError, match="new title"):
            await post_service.update_post(
                str(post.slug), UserId(post.author_id), title="Renamed"
            )
