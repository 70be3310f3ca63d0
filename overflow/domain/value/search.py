"""Resolved pagination and ordering for list queries."""

from typing import Literal

from pydantic import Field

from overflow.domain.value.common import ValueObject

SortField = Literal["questions", "created_at", "name"]


class SortSpec(ValueObject):
    """A single-field ordering."""

    field: SortField
    descending: bool


class ResolvedSearch(ValueObject):
    """Concrete skip/limit window, text filter and ordering.

    ``search`` is matched as a case-insensitive substring by repositories;
    ``None`` means no text restriction.
    """

    skip: int = Field(ge=0)
    limit: int = Field(ge=1)
    search: str | None = None
    sort: SortSpec
