"""In-memory implementation of Tag repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.value import ResolvedSearch, TagId, TagName

from .store import InMemoryStore


def _matches(tag: Tag, search: Optional[str]) -> bool:
    return not search or search.casefold() in tag.name.root.casefold()


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        """Initialize repository over a shared store."""
        self.store = store

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self.store.tags.get(tag_id)

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID, in input order."""
        return [self.store.tags[t] for t in tag_ids if t in self.store.tags]

    async def upsert_increment(self, name: TagName) -> Tag:
        """Find-or-create and increment.

        Runs without awaiting, so it cannot interleave with another coroutine.
        """
        tag_id = self.store.tag_names.get(name.canonical)
        now = datetime.now()

        if tag_id is None:
            tag = Tag(id=TagId(uuid4()), name=name, questions=1, created_at=now, updated_at=now)
            self.store.tag_names[name.canonical] = tag.id
        else:
            existing = self.store.tags[tag_id]
            tag = existing.model_copy(
                update={"questions": existing.questions + 1, "updated_at": now}
            )

        self.store.tags[tag.id] = tag
        return tag

    async def decrement(self, tag_ids: list[TagId]) -> None:
        """Decrement question counters (minimum 0)."""
        now = datetime.now()
        for tag_id in tag_ids:
            tag = self.store.tags.get(tag_id)
            if tag and tag.questions > 0:
                self.store.tags[tag_id] = tag.model_copy(
                    update={"questions": tag.questions - 1, "updated_at": now}
                )

    async def search(self, criteria: ResolvedSearch) -> list[Tag]:
        """Find one page of tags."""
        tags = [t for t in self.store.tags.values() if _matches(t, criteria.search)]

        # Stable two-pass sort: id as tie-breaker, then the requested field
        tags.sort(key=lambda t: str(t.id))
        if criteria.sort.field == "questions":
            tags.sort(key=lambda t: t.questions, reverse=criteria.sort.descending)
        elif criteria.sort.field == "created_at":
            tags.sort(key=lambda t: t.created_at, reverse=criteria.sort.descending)
        else:
            tags.sort(key=lambda t: t.canonical_name, reverse=criteria.sort.descending)

        return tags[criteria.skip : criteria.skip + criteria.limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count tags matching the name filter."""
        return sum(1 for t in self.store.tags.values() if _matches(t, search))

    async def save(self, tag: Tag) -> Tag:
        """Store a tag as-is. Test seeding helper."""
        self.store.tags[tag.id] = tag
        self.store.tag_names[tag.canonical_name] = tag.id
        return tag
