"""In-memory TagQuestion repository for testing."""

from overflow.domain.error import StoreError
from overflow.domain.model.tag_question import TagQuestion
from overflow.domain.repository.tag_question import TagQuestionRepository
from overflow.domain.value import QuestionId, TagId

from .store import InMemoryStore


class InMemoryTagQuestionRepository(TagQuestionRepository):
    """In-memory implementation of TagQuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def insert_many(self, records: list[TagQuestion]) -> None:
        """Insert join records, enforcing pair uniqueness like the real table."""
        keys = [record.key for record in records]
        duplicates = [
            k for i, k in enumerate(keys) if k in self.store.tag_questions or k in keys[:i]
        ]
        if duplicates:
            raise StoreError(f"Duplicate tag_question pair: {duplicates[0]}")

        for record in records:
            self.store.tag_questions[record.key] = record

    async def delete_many(self, question_id: QuestionId, tag_ids: list[TagId]) -> None:
        """Delete the join records of one question."""
        for tag_id in tag_ids:
            self.store.tag_questions.pop((tag_id, question_id), None)

    async def find_by_question(self, question_id: QuestionId) -> list[TagQuestion]:
        """List join records of a question."""
        return [
            record
            for record in self.store.tag_questions.values()
            if record.question_id == question_id
        ]
