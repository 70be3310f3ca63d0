"""In-memory question repository for testing."""

from typing import Optional

from overflow.domain.error import NotFoundError
from overflow.domain.model.question import Question
from overflow.domain.repository.question import QuestionRepository
from overflow.domain.value import QuestionId, TagId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _by_tag(self, tag_id: TagId, search: Optional[str]) -> list[Question]:
        questions = [q for q in self.store.questions.values() if tag_id in q.tag_ids]
        if search:
            needle = search.casefold()
            questions = [q for q in questions if needle in q.title.casefold()]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self.store.questions.get(question_id)

    async def create(self, question: Question) -> Optional[Question]:
        """Insert a new question."""
        self.store.questions[question.id] = question
        return question

    async def save(self, question: Question) -> Question:
        """Persist the mutable fields of an existing question."""
        existing = self.store.questions.get(question.id)
        if existing is None:
            raise NotFoundError("Question", str(question.id))

        saved = existing.model_copy(
            update={
                "title": question.title,
                "content": question.content,
                "tag_ids": list(question.tag_ids),
                "updated_at": question.updated_at,
            }
        )
        self.store.questions[question.id] = saved
        return saved

    async def find_by_tag(
        self,
        tag_id: TagId,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions carrying a tag, newest first."""
        questions = self._by_tag(tag_id, search)
        questions.sort(key=lambda q: str(q.id))
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count_by_tag(self, tag_id: TagId, search: Optional[str] = None) -> int:
        """Count questions carrying a tag."""
        return len(self._by_tag(tag_id, search))
