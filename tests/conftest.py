"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from inkwell.domain.model import Comment, Post
from inkwell.domain.service import slugify
from inkwell.domain.value import CommentId, PostId, Slug, UserId, Username

# Must be set before any Settings() is built by a test container
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")

# Spans and logs are recorded locally only
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def at(seconds: int) -> datetime:
    """Deterministic timestamp ``seconds`` after a fixed base time."""
    return BASE_TIME + timedelta(seconds=seconds)


def make_post(
    title: str = "Test Post",
    author_id: UserId | None = None,
    created_at: datetime | None = None,
    content: str = "Post content",
) -> Post:
    """Build a post with a slug derived from its title."""
    post_id = PostId(uuid4())
    created_at = created_at or BASE_TIME
    return Post(
        id=post_id,
        title=title,
        content=content,
        tags=[],
        slug=Slug(slugify(title, post_id)),
        author_id=author_id or UserId(uuid4()),
        author_username=Username("author"),
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(
    post_id: PostId,
    created_at: datetime,
    parent_id: CommentId | None = None,
    author_id: UserId | None = None,
    content: str = "A comment",
) -> Comment:
    """Build a comment with an explicit creation time."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        author_username=Username("commenter"),
        content=content,
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
    )


def register_user(client, username: str = "alice") -> dict[str, str]:
    """Register an account through the API and return its auth header."""
    response = client.post(
        "/users/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "correct horse battery",
        },
    )
    assert response.status_code == 201, response.json()
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
