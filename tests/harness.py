"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is reachable at ``DATABASE__URL`` with
migrations applied (``python scripts/run_migrations.py``).
"""

import pytest_asyncio

from overflow.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields a
    request-scoped container for resolving services, repositories and use
    cases. A fresh container means a fresh in-memory store per test.

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
        async def test_list_tags(unit_env):
            use_case = await unit_env.get(ListTagsUseCase)
            result = await use_case.run({"page": 1})
            assert result.success
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
