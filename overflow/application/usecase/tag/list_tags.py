"""List tags use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from overflow.domain.service import TagService, resolve_search
from overflow.domain.value import SortDirection

from ..base import BaseUseCase


class TagSummary(BaseModel):
    """Tag item in response."""

    id: str
    name: str
    questions: int
    created_at: datetime


class ListTagsRequest(BaseModel):
    """List tags request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)
    query: Optional[str] = None
    filter: Optional[str] = None  # popular, recent, oldest or name
    sort: Optional[SortDirection] = None


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagSummary]
    is_next: bool


class ListTagsUseCase(BaseUseCase):
    """Use case for browsing tags."""

    schema = ListTagsRequest

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            One page of tags and whether another page follows
        """
        criteria = resolve_search(
            page=request.page,
            page_size=request.page_size,
            query=request.query,
            filter=request.filter,
            sort=request.sort,
        )

        with logfire.span(
            "list_tags.execute",
            page=request.page,
            page_size=request.page_size,
            filter=request.filter,
        ):
            tags, is_next = await self.tag_service.list_tags(criteria)

            return ListTagsResponse(
                tags=[
                    TagSummary(
                        id=str(tag.id),
                        name=tag.name.root,
                        questions=tag.questions,
                        created_at=tag.created_at,
                    )
                    for tag in tags
                ],
                is_next=is_next,
            )
