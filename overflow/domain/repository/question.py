"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.question import Question
from overflow.domain.value import QuestionId, TagId


class QuestionRepository(ABC):
    """Repository for the Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, question: Question) -> Optional[Question]:
        """Insert a new question.

        Args:
            question: The question to insert

        Returns:
            The persisted question as read back from the store, or None if
            the store did not yield a row
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Persist the mutable fields of an existing question.

        Writes title, content, tag_ids and updated_at. The author and the
        counters are never written by this method.

        Args:
            question: The question to persist

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def find_by_tag(
        self,
        tag_id: TagId,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions whose tag set contains ``tag_id``, newest first.

        Args:
            tag_id: Tag that must be attached to the question
            search: Case-insensitive substring the title must contain
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of matching questions
        """
        pass

    @abstractmethod
    async def count_by_tag(self, tag_id: TagId, search: Optional[str] = None) -> int:
        """Count questions matching the same filters as ``find_by_tag``."""
        pass
