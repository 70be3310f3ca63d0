"""TagQuestion join record repository interface."""

from abc import ABC, abstractmethod

from overflow.domain.model.tag_question import TagQuestion
from overflow.domain.value import QuestionId, TagId


class TagQuestionRepository(ABC):
    """Repository for question-tag join records."""

    @abstractmethod
    async def insert_many(self, records: list[TagQuestion]) -> None:
        """Insert join records in one bulk statement.

        Args:
            records: Join records to insert (no-op when empty)
        """
        pass

    @abstractmethod
    async def delete_many(self, question_id: QuestionId, tag_ids: list[TagId]) -> None:
        """Delete the join records linking ``question_id`` to ``tag_ids``.

        Args:
            question_id: Question whose associations are dropped
            tag_ids: Tags to detach (no-op when empty)
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[TagQuestion]:
        """List the join records of a question."""
        pass
