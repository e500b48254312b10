"""Test harness for unit tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from inkwell.persistence.tables import metadata
from inkwell.util.di import Component
from tests.di import build_test_container


async def reset_database(container: AsyncContainer) -> None:
    """Create the schema if needed and empty every table.

    Skips the calling test when PostgreSQL can't be reached.
    """
    engine = await container.get(AsyncEngine)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
            await conn.execute(text("TRUNCATE users, posts, comments CASCADE"))
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not available: {e}")


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with the specified unmocking
    - Yields a request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post = await repo.save(make_post())
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
