"""Domain value objects for Overflow."""

from overflow.domain.value.identifiers import QuestionId, TagId, UserId
from overflow.domain.value.search import ResolvedSearch, SortField, SortSpec
from overflow.domain.value.types import SearchFilter, SortDirection, TagName

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "TagId",
    # Types
    "TagName",
    "SearchFilter",
    "SortDirection",
    # Search
    "ResolvedSearch",
    "SortField",
    "SortSpec",
]
