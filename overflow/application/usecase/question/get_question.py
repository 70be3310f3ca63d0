"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from overflow.domain.service import QuestionService, TagService
from overflow.domain.value import QuestionId

from ..base import BaseUseCase
from .common import QuestionResponse


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID


class GetQuestionUseCase(BaseUseCase):
    """Use case for reading a single question with its tags."""

    schema = GetQuestionRequest

    def __init__(self, question_service: QuestionService, tag_service: TagService) -> None:
        self.question_service = question_service
        self.tag_service = tag_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Load a question and resolve its tags.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(request.question_id)

        with logfire.span("get_question.execute", question_id=str(question_id)):
            question = await self.question_service.get_question(question_id)
            tags = await self.tag_service.get_tags(question.tag_ids)
            return QuestionResponse.from_domain(question, tags)
