"""Pagination and ordering resolution for list queries.

Turns raw page/page_size/query/filter/sort parameters into a concrete
``ResolvedSearch``. Pure functions, no store access.
"""

from typing import Optional

from overflow.domain.value import ResolvedSearch, SearchFilter, SortDirection, SortSpec

_FILTER_ORDERING: dict[SearchFilter, SortSpec] = {
    SearchFilter.POPULAR: SortSpec(field="questions", descending=True),
    SearchFilter.RECENT: SortSpec(field="created_at", descending=True),
    SearchFilter.OLDEST: SortSpec(field="created_at", descending=False),
    SearchFilter.NAME: SortSpec(field="name", descending=False),
}


def parse_filter(
    value: Optional[str], default: SearchFilter = SearchFilter.POPULAR
) -> SearchFilter:
    """Map a raw filter key to a SearchFilter, falling back to ``default``."""
    if not value:
        return default
    try:
        return SearchFilter(value.strip().lower())
    except ValueError:
        return default


def resolve_search(
    page: int = 1,
    page_size: int = 10,
    query: Optional[str] = None,
    filter: Optional[str] = None,
    sort: Optional[SortDirection] = None,
    default: SearchFilter = SearchFilter.POPULAR,
) -> ResolvedSearch:
    """Resolve list parameters into a window, a text filter and an ordering.

    Args:
        page: 1-based page number
        page_size: Items per page
        query: Free text; blank means no text restriction
        filter: One of popular/recent/oldest/name; anything else uses ``default``
        sort: Explicit direction overriding the filter's natural direction
        default: Ordering for absent or unknown filters

    Returns:
        Resolved search criteria

    Raises:
        ValueError: If page or page_size is not positive. Request validation
            rejects these before they get here.
    """
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be positive")

    ordering = _FILTER_ORDERING[parse_filter(filter, default)]
    if sort is not None:
        ordering = SortSpec(
            field=ordering.field, descending=sort == SortDirection.DESC
        )

    search = query.strip() if query else None

    return ResolvedSearch(
        skip=(page - 1) * page_size,
        limit=page_size,
        search=search or None,
        sort=ordering,
    )


def has_next_page(total: int, skip: int, returned: int) -> bool:
    """Whether items remain after the current page."""
    return total > skip + returned
