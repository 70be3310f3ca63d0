"""Unit tests for ListTagsUseCase."""

import pytest

from overflow.application.usecase.tag import ListTagsUseCase
from overflow.domain.repository import TagRepository
from tests.conftest import make_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env) -> None:
    tag_repo = await unit_env.get(TagRepository)
    await tag_repo.save(make_tag("rust", questions=5, age_days=3))
    await tag_repo.save(make_tag("Python", questions=9, age_days=1))
    await tag_repo.save(make_tag("go", questions=2, age_days=2))
    await tag_repo.save(make_tag("PyTorch", questions=0, age_days=0))


def names(result) -> list[str]:
    return [t.name for t in result.data.tags]


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "filter_key, expected",
        [
            ("popular", ["Python", "rust", "go", "PyTorch"]),
            ("recent", ["PyTorch", "Python", "go", "rust"]),
            ("oldest", ["rust", "go", "Python", "PyTorch"]),
            ("name", ["go", "Python", "PyTorch", "rust"]),
            ("nonsense", ["Python", "rust", "go", "PyTorch"]),
        ],
    )
    async def test_filters(self, unit_env, filter_key, expected):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        result = await use_case.run({"filter": filter_key})

        # Assert
        assert result.success is True
        assert names(result) == expected
        assert result.data.is_next is False

    @pytest.mark.asyncio
    async def test_query_filters_names_case_insensitively(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        result = await use_case.run({"query": "py", "filter": "name"})

        # Assert
        assert names(result) == ["Python", "PyTorch"]

    @pytest.mark.asyncio
    async def test_sort_overrides_direction(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        result = await use_case.run({"filter": "name", "sort": "desc"})

        # Assert
        assert names(result) == ["rust", "PyTorch", "Python", "go"]

    @pytest.mark.asyncio
    async def test_pagination_from_string_params(self, unit_env):
        """Query-string values are coerced: page 2 of size 10 over 15 tags."""
        # Arrange
        tag_repo = await unit_env.get(TagRepository)
        for i in range(15):
            await tag_repo.save(make_tag(f"tag{i:02d}"))
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        first = await use_case.run({"page": "1", "page_size": "10"})
        second = await use_case.run({"page": "2", "page_size": "10"})

        # Assert
        assert len(first.data.tags) == 10
        assert first.data.is_next is True
        assert len(second.data.tags) == 5
        assert second.data.is_next is False
        assert not {t.id for t in first.data.tags} & {t.id for t in second.data.tags}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params, field",
        [
            ({"page": 0}, "page"),
            ({"page_size": 101}, "page_size"),
            ({"page_size": "ten"}, "page_size"),
            ({"sort": "sideways"}, "sort"),
        ],
    )
    async def test_invalid_params(self, unit_env, params, field):
        # Arrange
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        result = await use_case.run(params)

        # Assert
        assert result.success is False
        assert result.status == 400
        assert field in result.error.details

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListTagsUseCase)

        # Act
        result = await use_case.run({})

        # Assert
        assert result.success is True
        assert result.data.tags == []
        assert result.data.is_next is False
