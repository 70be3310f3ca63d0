"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.tag import Tag
from overflow.domain.value import ResolvedSearch, TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags, in the order of ``tag_ids`` (missing ids are skipped)
        """
        pass

    @abstractmethod
    async def upsert_increment(self, name: TagName) -> Tag:
        """Atomically find-or-create a tag by canonical name and count one use.

        A new tag keeps the casing of ``name`` and starts at one question; an
        existing tag (matched case-insensitively) is incremented by one.
        Concurrent calls for the same new name yield a single tag and lose no
        increments.

        Args:
            name: Tag name as supplied by the user

        Returns:
            The tag after the increment
        """
        pass

    @abstractmethod
    async def decrement(self, tag_ids: list[TagId]) -> None:
        """Atomically decrement the question counter of each tag by one.

        Counters never go below zero and tags are never deleted.

        Args:
            tag_ids: Tags to decrement
        """
        pass

    @abstractmethod
    async def search(self, criteria: ResolvedSearch) -> list[Tag]:
        """Find one page of tags.

        Args:
            criteria: Resolved window, name filter and ordering

        Returns:
            Tags on the requested page
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count tags whose name contains ``search`` (case-insensitive)."""
        pass
