"""Test harness for unit and integration tests.

Integration tests assume postgres is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from pod.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_resolve(unit_env):
            resolver = await unit_env.get(IdentityResolver)
            identity = await resolver.resolve("alice@example.org")
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
