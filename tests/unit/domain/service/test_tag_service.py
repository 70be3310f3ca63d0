"""Unit tests for TagService."""

from uuid import uuid4

import pytest

from overflow.domain.error import NotFoundError
from overflow.domain.service import TagService, resolve_search
from overflow.domain.value import TagId, TagName
from overflow.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTagRepository,
)
from tests.conftest import make_tag


class RecordingTagRepository(InMemoryTagRepository):
    """Tag repository that records the order names are upserted in."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.upserted: list[str] = []

    async def upsert_increment(self, name):
        self.upserted.append(name.root)
        return await super().upsert_increment(name)


@pytest.fixture
def tag_repo() -> InMemoryTagRepository:
    return InMemoryTagRepository(InMemoryStore())


class TestResolve:
    """Tests for TagService.resolve()."""

    @pytest.mark.asyncio
    async def test_creates_new_tag_with_one_question(self, tag_repo):
        """An unseen name creates a tag with the supplied casing and count 1."""
        # Arrange
        service = TagService(tag_repo)

        # Act
        tag = await service.resolve(TagName("Python"))

        # Assert
        assert tag.name.root == "Python"
        assert tag.questions == 1
        assert await tag_repo.find_by_id(tag.id) == tag

    @pytest.mark.asyncio
    async def test_matches_case_insensitively(self, tag_repo):
        """A differently cased name resolves to the same tag and increments it."""
        # Arrange
        service = TagService(tag_repo)
        first = await service.resolve(TagName("Python"))

        # Act
        second = await service.resolve(TagName("PYTHON"))

        # Assert
        assert second.id == first.id
        assert second.name.root == "Python"  # First casing is kept
        assert second.questions == 2
        assert await tag_repo.count() == 1

    @pytest.mark.asyncio
    async def test_surrounding_whitespace_ignored(self, tag_repo):
        # Arrange
        service = TagService(tag_repo)
        first = await service.resolve(TagName("rust"))

        # Act
        second = await service.resolve(TagName("  Rust "))

        # Assert
        assert second.id == first.id


class TestResolveMany:
    """Tests for TagService.resolve_many()."""

    @pytest.mark.asyncio
    async def test_resolves_in_canonical_order(self):
        """Names are upserted alphabetically by canonical name, whatever the input order."""
        # Arrange
        repo = RecordingTagRepository(InMemoryStore())
        service = TagService(repo)

        # Act
        resolved = await service.resolve_many(
            [TagName("rust"), TagName("AI"), TagName("Go")]
        )

        # Assert
        assert repo.upserted == ["AI", "Go", "rust"]
        assert sorted(resolved) == ["ai", "go", "rust"]
        assert resolved["ai"].name.root == "AI"

    @pytest.mark.asyncio
    async def test_crossed_orders_lock_identically(self):
        """Two requests naming the same tags in opposite orders upsert in one order."""
        # Arrange
        store = InMemoryStore()
        first = RecordingTagRepository(store)
        second = RecordingTagRepository(store)

        # Act
        await TagService(first).resolve_many([TagName("a"), TagName("b")])
        await TagService(second).resolve_many([TagName("b"), TagName("a")])

        # Assert
        assert first.upserted == second.upserted == ["a", "b"]
        assert [t.questions for t in store.tags.values()] == [2, 2]


class TestRelease:
    """Tests for TagService.release()."""

    @pytest.mark.asyncio
    async def test_decrements_each_tag(self, tag_repo):
        # Arrange
        service = TagService(tag_repo)
        go = await tag_repo.save(make_tag("go", questions=3))
        rust = await tag_repo.save(make_tag("rust", questions=1))

        # Act
        await service.release([go.id, rust.id])

        # Assert
        assert (await tag_repo.find_by_id(go.id)).questions == 2
        assert (await tag_repo.find_by_id(rust.id)).questions == 0

    @pytest.mark.asyncio
    async def test_never_below_zero_and_never_deleted(self, tag_repo):
        """A zero-counter tag stays at zero and stays in the store."""
        # Arrange
        service = TagService(tag_repo)
        idle = await tag_repo.save(make_tag("idle", questions=0))

        # Act
        await service.release([idle.id])

        # Assert
        tag = await tag_repo.find_by_id(idle.id)
        assert tag is not None
        assert tag.questions == 0


class TestGetTag:
    """Tests for TagService.get_tag() and get_tags()."""

    @pytest.mark.asyncio
    async def test_missing_tag_raises(self, tag_repo):
        # Arrange
        service = TagService(tag_repo)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_tag(TagId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_tags_preserves_order(self, tag_repo):
        # Arrange
        service = TagService(tag_repo)
        a = await tag_repo.save(make_tag("a"))
        b = await tag_repo.save(make_tag("b"))

        # Act
        tags = await service.get_tags([b.id, a.id])

        # Assert
        assert [t.id for t in tags] == [b.id, a.id]


class TestListTags:
    """Tests for TagService.list_tags()."""

    @pytest.mark.asyncio
    async def test_fifteen_tags_second_page(self, tag_repo):
        """Page 2 of size 10 over 15 tags returns 5 tags and no next page."""
        # Arrange
        service = TagService(tag_repo)
        for i in range(15):
            await tag_repo.save(make_tag(f"tag{i:02d}", questions=i))

        # Act
        tags, is_next = await service.list_tags(resolve_search(page=2, page_size=10))

        # Assert
        assert len(tags) == 5
        assert is_next is False
        # Popular order: the five least used tags end up on page 2
        assert [t.questions for t in tags] == [4, 3, 2, 1, 0]

    @pytest.mark.asyncio
    async def test_first_page_has_next(self, tag_repo):
        # Arrange
        service = TagService(tag_repo)
        for i in range(15):
            await tag_repo.save(make_tag(f"tag{i:02d}"))

        # Act
        tags, is_next = await service.list_tags(resolve_search(page=1, page_size=10))

        # Assert
        assert len(tags) == 10
        assert is_next is True
