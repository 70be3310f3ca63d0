"""Create question use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from overflow.domain.model import Question
from overflow.domain.repository import UnitOfWork
from overflow.domain.service import QuestionService, TagAssociationService, TagService
from overflow.domain.value import QuestionId, TagName

from ..base import BaseUseCase
from .common import (
    QuestionContent,
    QuestionResponse,
    QuestionTags,
    QuestionTitle,
    caller_id,
)


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: QuestionTitle
    content: QuestionContent
    tags: QuestionTags
    user_id: str | None = None  # Injected from the authenticated caller


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a new question."""

    schema = CreateQuestionRequest
    authorize = True
    success_status = 201

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """Initialize create question use case.

        Args:
            unit_of_work: Transaction factory
        """
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateQuestionRequest) -> QuestionResponse:
        """Execute create question flow.

        Steps:
        1. Insert the question with the caller as author
        2. Resolve every distinct tag name, counting one use each
        3. Bulk insert the join records
        4. Persist the question's tag set

        All steps share one transaction.

        Args:
            request: Validated create question request

        Returns:
            The created question with its resolved tags

        Raises:
            AuthenticationError: If the request carries no caller
            CreationError: If the store does not return the inserted question
            StoreError: If the transaction fails
        """
        author_id = caller_id(request.user_id)
        names = [TagName(name) for name in request.tags]

        with logfire.span(
            "create_question.execute",
            title=request.title,
            tags=request.tags,
            author_id=request.user_id,
        ):
            async with self.unit_of_work.begin() as tx:
                question_service = QuestionService(tx.questions)
                tag_service = TagService(tx.tags)
                associations = TagAssociationService(tag_service, tx.tag_questions)

                question = await question_service.create_question(
                    Question(
                        id=QuestionId(uuid4()),
                        title=request.title,
                        content=request.content,
                        author_id=author_id,
                    )
                )
                question = await associations.attach(question, names)
                question = await question_service.save_question(question)
                tags = await tag_service.get_tags(question.tag_ids)

            logfire.info(
                "Question created successfully",
                question_id=str(question.id),
                tag_count=len(tags),
            )
            return QuestionResponse.from_domain(question, tags)
