"""Tag domain service."""

import logfire

from overflow.domain.error import NotFoundError
from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.service.pagination import has_next_page
from overflow.domain.value import ResolvedSearch, TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag identity and tag listings."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository (bound to the caller's transaction
                when used for writes)
        """
        self.tag_repository = tag_repository

    async def resolve(self, name: TagName) -> Tag:
        """Find-or-create the canonical tag for ``name`` and count one use.

        Args:
            name: Tag name in any casing

        Returns:
            The canonical tag, its counter already incremented
        """
        with logfire.span("tag_service.resolve", tag_name=name.root):
            tag = await self.tag_repository.upsert_increment(name)
            logfire.info(
                "Tag resolved",
                tag_id=str(tag.id),
                tag_name=tag.name.root,
                questions=tag.questions,
            )
            return tag

    async def resolve_many(self, names: list[TagName]) -> dict[str, Tag]:
        """Resolve several names, locking tag rows in canonical-name order.

        Concurrent transactions naming the same tags in different orders
        therefore take their row locks in the same order.

        Args:
            names: Distinct tag names in any casing

        Returns:
            Resolved tags keyed by canonical name
        """
        resolved: dict[str, Tag] = {}
        for name in sorted(names, key=lambda n: n.canonical):
            resolved[name.canonical] = await self.resolve(name)
        return resolved

    async def release(self, tag_ids: list[TagId]) -> None:
        """Count one use less for each tag. Tags are never deleted.

        Args:
            tag_ids: Tags losing one question each
        """
        if not tag_ids:
            return

        with logfire.span("tag_service.release", tag_ids=[str(t) for t in tag_ids]):
            await self.tag_repository.decrement(sorted(tag_ids, key=str))
            logfire.info("Tags released", count=len(tag_ids))

    async def get_tag(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.get_tag", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def get_tags(self, tag_ids: list[TagId]) -> list[Tag]:
        """Get tags by ID, preserving the order of ``tag_ids``."""
        if not tag_ids:
            return []
        return await self.tag_repository.find_by_ids(tag_ids)

    async def list_tags(self, criteria: ResolvedSearch) -> tuple[list[Tag], bool]:
        """Get one page of tags.

        Args:
            criteria: Resolved pagination, name filter and ordering

        Returns:
            Tuple of (tags on the page, whether a next page exists)
        """
        with logfire.span(
            "tag_service.list_tags",
            skip=criteria.skip,
            limit=criteria.limit,
            search=criteria.search,
            sort=criteria.sort.field,
            descending=criteria.sort.descending,
        ):
            total = await self.tag_repository.count(criteria.search)
            tags = await self.tag_repository.search(criteria)
            is_next = has_next_page(total, criteria.skip, len(tags))
            logfire.info("Tags listed", count=len(tags), total=total, is_next=is_next)
            return tags, is_next
