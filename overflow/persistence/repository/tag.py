"""PostgreSQL implementation of Tag repository."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.value import ResolvedSearch, TagId, TagName
from overflow.persistence.database import store_operation
from overflow.persistence.mappers import row_to_tag
from overflow.persistence.tables import tags_table

# Names sort case-insensitively
_SORT_COLUMNS = {
    "questions": tags_table.c.questions,
    "created_at": tags_table.c.created_at,
    "name": tags_table.c.canonical_name,
}


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @store_operation
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(dict(row)) if row else None

    @store_operation
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        by_id = {row["id"]: row_to_tag(dict(row)) for row in result.mappings()}
        return [by_id[tag_id] for tag_id in tag_ids if tag_id in by_id]

    @store_operation
    async def upsert_increment(self, name: TagName) -> Tag:
        """Find-or-create by canonical name and increment, in one statement.

        ON CONFLICT on the unique canonical_name makes concurrent creators of
        the same new name converge on one row; the increment runs against
        the row the conflict resolved to, so no update is lost.
        """
        with logfire.span("tag_repository.upsert_increment", tag_name=name.root):
            stmt = (
                insert(tags_table)
                .values(
                    id=uuid4(),
                    name=name.root,
                    canonical_name=name.canonical,
                    questions=1,
                )
                .on_conflict_do_update(
                    index_elements=[tags_table.c.canonical_name],
                    set_={
                        "questions": tags_table.c.questions + 1,
                        "updated_at": func.now(),
                    },
                )
                .returning(tags_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            return row_to_tag(dict(row))

    @store_operation
    async def decrement(self, tag_ids: list[TagId]) -> None:
        """Atomically decrement question counters (minimum 0)."""
        if not tag_ids:
            return

        stmt = (
            update(tags_table)
            .where(tags_table.c.id.in_(tag_ids))
            .where(tags_table.c.questions > 0)  # Don't go below 0
            .values(questions=tags_table.c.questions - 1, updated_at=func.now())
        )
        await self.session.execute(stmt)

    @store_operation
    async def search(self, criteria: ResolvedSearch) -> list[Tag]:
        """Find one page of tags."""
        with logfire.span(
            "tag_repository.search",
            search=criteria.search,
            sort=criteria.sort.field,
            limit=criteria.limit,
            offset=criteria.skip,
        ):
            column = _SORT_COLUMNS[criteria.sort.field]
            order = column.desc() if criteria.sort.descending else column.asc()

            stmt = select(tags_table)
            if criteria.search:
                stmt = stmt.where(
                    tags_table.c.name.icontains(criteria.search, autoescape=True)
                )
            # Tie-break on id so pages are stable
            stmt = stmt.order_by(order, tags_table.c.id)
            stmt = stmt.offset(criteria.skip).limit(criteria.limit)

            result = await self.session.execute(stmt)
            return [row_to_tag(dict(row)) for row in result.mappings()]

    @store_operation
    async def count(self, search: Optional[str] = None) -> int:
        """Count tags matching the name filter."""
        stmt = select(func.count()).select_from(tags_table)
        if search:
            stmt = stmt.where(tags_table.c.name.icontains(search, autoescape=True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0
