"""Get questions for a tag use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from overflow.domain.service import (
    QuestionService,
    TagService,
    UserService,
    resolve_search,
)
from overflow.domain.value import SearchFilter, TagId

from ..base import BaseUseCase
from .list_tags import TagSummary


class TagRef(BaseModel):
    """Tag reference inside a question listing."""

    id: str
    name: str


class AuthorRef(BaseModel):
    """Author projection inside a question listing."""

    id: str
    name: str
    image: Optional[str] = None


class QuestionSummary(BaseModel):
    """Reduced question projection for listings."""

    id: str
    title: str
    views: int
    answers: int
    upvotes: int
    downvotes: int
    author: Optional[AuthorRef]  # None if the author record is gone
    tags: list[TagRef]
    created_at: datetime


class GetTagQuestionsRequest(BaseModel):
    """Get tag questions request."""

    tag_id: UUID
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)
    query: Optional[str] = None


class GetTagQuestionsResponse(BaseModel):
    """Get tag questions response."""

    tag: TagSummary
    questions: list[QuestionSummary]
    is_next: bool


class GetTagQuestionsUseCase(BaseUseCase):
    """Use case for listing the questions filed under a tag, newest first."""

    schema = GetTagQuestionsRequest

    def __init__(
        self,
        tag_service: TagService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize get tag questions use case.

        Args:
            tag_service: Tag domain service
            question_service: Question domain service
            user_service: User domain service (author projection)
        """
        self.tag_service = tag_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: GetTagQuestionsRequest) -> GetTagQuestionsResponse:
        """Execute get tag questions flow.

        Raises:
            NotFoundError: If the tag does not exist
        """
        tag_id = TagId(request.tag_id)
        criteria = resolve_search(
            page=request.page,
            page_size=request.page_size,
            query=request.query,
            default=SearchFilter.RECENT,
        )

        with logfire.span(
            "get_tag_questions.execute",
            tag_id=str(tag_id),
            page=request.page,
            page_size=request.page_size,
        ):
            tag = await self.tag_service.get_tag(tag_id)
            questions, is_next = await self.question_service.list_by_tag(tag_id, criteria)

            # Batch-load authors and tags for the whole page
            users = await self.user_service.get_users_by_ids(
                [q.author_id for q in questions]
            )
            tag_ids = list(dict.fromkeys(t for q in questions for t in q.tag_ids))
            tags = {t.id: t for t in await self.tag_service.get_tags(tag_ids)}

            summaries = []
            for question in questions:
                author = users.get(question.author_id)
                summaries.append(
                    QuestionSummary(
                        id=str(question.id),
                        title=question.title,
                        views=question.views,
                        answers=question.answers,
                        upvotes=question.upvotes,
                        downvotes=question.downvotes,
                        author=(
                            AuthorRef(id=str(author.id), name=author.name, image=author.image)
                            if author
                            else None
                        ),
                        tags=[
                            TagRef(id=str(t), name=tags[t].name.root)
                            for t in question.tag_ids
                            if t in tags
                        ],
                        created_at=question.created_at,
                    )
                )

            return GetTagQuestionsResponse(
                tag=TagSummary(
                    id=str(tag.id),
                    name=tag.name.root,
                    questions=tag.questions,
                    created_at=tag.created_at,
                ),
                questions=summaries,
                is_next=is_next,
            )
