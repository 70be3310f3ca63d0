"""Question domain service."""

import logfire

from overflow.domain.error import CreationError, NotFoundError
from overflow.domain.model.question import Question
from overflow.domain.repository.question import QuestionRepository
from overflow.domain.service.pagination import has_next_page
from overflow.domain.value import QuestionId, ResolvedSearch, TagId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(self, question: Question) -> Question:
        """Insert a new question.

        Raises:
            CreationError: If the store does not yield the inserted question
        """
        with logfire.span(
            "question_service.create_question",
            question_id=str(question.id),
            title=question.title,
        ):
            created = await self.question_repository.create(question)
            if created is None:
                logfire.error("Question insert returned nothing", question_id=str(question.id))
                raise CreationError("question")
            logfire.info("Question created", question_id=str(created.id))
            return created

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def update_content(
        self, question: Question, title: str, content: str
    ) -> Question:
        """Apply a new title and content, skipping the write when nothing changed.

        Args:
            question: Current question
            title: New title
            content: New content

        Returns:
            The (possibly unchanged) question
        """
        if not question.differs_from(title, content):
            logfire.debug("Question content unchanged", question_id=str(question.id))
            return question

        with logfire.span("question_service.update_content", question_id=str(question.id)):
            updated = await self.question_repository.save(
                question.with_content(title, content)
            )
            logfire.info("Question content updated", question_id=str(question.id))
            return updated

    async def save_question(self, question: Question) -> Question:
        """Persist a question's mutable fields."""
        with logfire.span(
            "question_service.save_question",
            question_id=str(question.id),
            tag_ids=[str(t) for t in question.tag_ids],
        ):
            saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=str(saved.id))
            return saved

    async def list_by_tag(
        self, tag_id: TagId, criteria: ResolvedSearch
    ) -> tuple[list[Question], bool]:
        """Get one page of questions carrying ``tag_id``, newest first.

        Returns:
            Tuple of (questions on the page, whether a next page exists)
        """
        with logfire.span(
            "question_service.list_by_tag",
            tag_id=str(tag_id),
            skip=criteria.skip,
            limit=criteria.limit,
            search=criteria.search,
        ):
            total = await self.question_repository.count_by_tag(tag_id, criteria.search)
            questions = await self.question_repository.find_by_tag(
                tag_id,
                search=criteria.search,
                limit=criteria.limit,
                offset=criteria.skip,
            )
            is_next = has_next_page(total, criteria.skip, len(questions))
            logfire.info(
                "Questions listed for tag",
                tag_id=str(tag_id),
                count=len(questions),
                total=total,
            )
            return questions, is_next
