"""End-to-end tests for post endpoints."""

import pytest
from fastapi.testclient import TestClient

from inkwell.application.usecase.post import ListPostsUseCase
from inkwell.interface.api.app import create_app
from tests.conftest import register_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(container=build_test_container()))


def create_post(client, headers, title="Hello World", content="Body text"):
    response = client.post(
        "/posts", json={"title": title, "content": content}, headers=headers
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]


class TestPostLifecycle:
    """Create, read, update and delete over HTTP."""

    def test_create_post(self, client):
        """Creating a post answers 201 with its slug."""
        # Arrange
        headers = register_user(client)

        # Act
        response = client.post(
            "/posts",
            json={"title": "Hello World", "content": "Body", "tags": ["python"]},
            headers=headers,
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Post created successfully"
        assert body["data"]["slug"] == "hello-world"
        assert body["data"]["author_username"] == "alice"
        assert body["data"]["tags"] == ["python"]

    def test_create_requires_auth(self, client):
        """Anonymous callers can't create posts."""
        response = client.post("/posts", json={"title": "T", "content": "C"})

        assert response.status_code == 401

    def test_missing_fields_bad_request(self, client):
        """Title and content are required."""
        # Arrange
        headers = register_user(client)

        # Act
        response = client.post("/posts", json={"title": "Only title"}, headers=headers)

        # Assert
        assert response.status_code == 400
        assert response.json()["message"] == "Title and content are required."

    def test_duplicate_title_conflicts(self, client):
        """A second post with the same title answers 409."""
        # Arrange
        headers = register_user(client)
        create_post(client, headers)

        # Act
        response = client.post(
            "/posts", json={"title": "Hello World", "content": "Again"}, headers=headers
        )

        # Assert
        assert response.status_code == 409

    def test_get_post_counts_views(self, client):
        """Each fetch counts as a view."""
        # Arrange
        headers = register_user(client)
        post = create_post(client, headers)

        # Act
        client.get(f"/posts/{post['slug']}")
        response = client.get(f"/posts/{post['slug']}")

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "Post retrieved"
        assert response.json()["data"]["views"] == 2

    def test_unknown_slug_not_found(self, client):
        """Unknown posts answer 404."""
        response = client.get("/posts/no-such-post")

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"

    def test_update_by_author(self, client):
        """The author can retitle a post, which moves its slug."""
        # Arrange
        headers = register_user(client)
        post = create_post(client, headers)

        # Act
        response = client.put(
            f"/posts/{post['slug']}", json={"title": "New Title"}, headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["slug"] == "new-title"
        assert client.get("/posts/new-title").status_code == 200

    def test_update_by_other_user_forbidden(self, client):
        """Other users can't edit the post."""
        # Arrange
        post = create_post(client, register_user(client, "alice"))
        intruder = register_user(client, "mallory")

        # Act
        response = client.put(
            f"/posts/{post['slug']}", json={"content": "Hijacked"}, headers=intruder
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["success"] is False

    def test_delete_by_author(self, client):
        """A deleted post is gone."""
        # Arrange
        headers = register_user(client)
        post = create_post(client, headers)

        # Act
        response = client.delete(f"/posts/{post['slug']}", headers=headers)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Post deleted"}
        assert client.get(f"/posts/{post['slug']}").status_code == 404


class TestListingAndSearch:
    """Listing and searching posts."""

    def test_list_posts(self, client):
        """Listing returns the page with pagination metadata."""
        # Arrange
        headers = register_user(client)
        create_post(client, headers, title="First")
        create_post(client, headers, title="Second")

        # Act
        response = client.get("/posts", params={"limit": 1})

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 2
        assert data["limit"] == 1
        assert len(data["posts"]) == 1

    def test_limit_over_maximum_bad_request(self, client):
        """Page size is capped."""
        response = client.get("/posts", params={"limit": 1000})

        assert response.status_code == 400

    def test_search(self, client):
        """Search matches any query term."""
        # Arrange
        headers = register_user(client)
        create_post(client, headers, title="Async Python", content="Loops")
        create_post(client, headers, title="Gardening", content="Tomatoes")

        # Act
        response = client.get("/posts/search", params={"query": "python"})

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_posts"] == 1
        assert data["total_pages"] == 1
        assert data["current_page"] == 1
        assert data["posts"][0]["title"] == "Async Python"

    def test_search_without_query_bad_request(self, client):
        """A query is required."""
        response = client.get("/posts/search")

        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required."


class TestPostLikes:
    """Like toggling on posts."""

    def test_like_then_unlike(self, client):
        """The second toggle undoes the first."""
        # Arrange
        headers = register_user(client)
        post = create_post(client, headers)

        # Act
        liked = client.patch(f"/posts/{post['slug']}/like", headers=headers)
        unliked = client.patch(f"/posts/{post['slug']}/like", headers=headers)

        # Assert
        assert liked.json()["message"] == "Post liked"
        assert liked.json()["data"] == {"liked": True, "like_count": 1}
        assert unliked.json()["message"] == "Post unliked"
        assert unliked.json()["data"] == {"liked": False, "like_count": 0}


class TestUnexpectedErrors:
    """Unhandled failures."""

    def test_unexpected_error_is_generic_500(self, monkeypatch):
        """Unexpected exceptions answer 500 without leaking details."""
        # Arrange
        async def boom(self, request):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(ListPostsUseCase, "execute", boom)
        client = TestClient(
            create_app(container=build_test_container()),
            raise_server_exceptions=False,
        )

        # Act
        response = client.get("/posts")

        # Assert
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Internal server error",
        }
