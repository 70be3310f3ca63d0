"""Join record between a tag and a question."""

from datetime import datetime

from pydantic import Field

from overflow.domain.model.common import DomainModel
from overflow.domain.value import QuestionId, TagId


class TagQuestion(DomainModel):
    """One active question-tag association.

    Identified by the (tag_id, question_id) pair; at most one record exists
    per pair.
    """

    tag_id: TagId
    question_id: QuestionId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> tuple[TagId, QuestionId]:
        return (self.tag_id, self.question_id)
