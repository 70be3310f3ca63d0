"""Edit question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from overflow.domain.error import NotAuthorizedError
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


class EditQuestionRequest(BaseModel):
    """Edit question request."""

    question_id: UUID
    title: QuestionTitle
    content: QuestionContent
    tags: QuestionTags
    user_id: str | None = None  # Must be the question author


class EditQuestionUseCase(BaseUseCase):
    """Use case for editing a question's content and tags."""

    schema = EditQuestionRequest
    authorize = True

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """Initialize edit question use case.

        Args:
            unit_of_work: Transaction factory
        """
        self.unit_of_work = unit_of_work

    async def execute(self, request: EditQuestionRequest) -> QuestionResponse:
        """Execute edit question flow.

        The title and content are written only when they changed. Tags are
        diffed case-insensitively against the current set: added names are
        resolved, removed tags released, unchanged tags left alone.

        Args:
            request: Validated edit question request

        Returns:
            The persisted question with its resolved tags

        Raises:
            AuthenticationError: If the request carries no caller
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
            StoreError: If the transaction fails
        """
        user_id = caller_id(request.user_id)
        question_id = QuestionId(request.question_id)
        names = [TagName(name) for name in request.tags]

        with logfire.span(
            "edit_question.execute",
            question_id=str(question_id),
            user_id=request.user_id,
            tags=request.tags,
        ):
            async with self.unit_of_work.begin() as tx:
                question_service = QuestionService(tx.questions)
                tag_service = TagService(tx.tags)
                associations = TagAssociationService(tag_service, tx.tag_questions)

                question = await question_service.get_question(question_id)

                if not question.is_authored_by(user_id):
                    logfire.warn(
                        "Unauthorized question edit attempt",
                        question_id=str(question_id),
                        user_id=request.user_id,
                    )
                    raise NotAuthorizedError("question", str(question_id), str(user_id))

                question = await question_service.update_content(
                    question, request.title, request.content
                )
                current_tags = await tag_service.get_tags(question.tag_ids)
                question = await associations.synchronize(question, current_tags, names)
                question = await question_service.save_question(question)
                tags = await tag_service.get_tags(question.tag_ids)

            logfire.info("Question edited successfully", question_id=str(question.id))
            return QuestionResponse.from_domain(question, tags)
