"""Shared state for the in-memory repositories."""

import asyncio
from typing import Any

from overflow.domain.model import Question, Tag, TagQuestion, User
from overflow.domain.value import QuestionId, TagId, UserId


class InMemoryStore:
    """Collections shared by every in-memory repository of one container.

    Domain models are immutable, so a shallow copy of each collection is a
    complete snapshot.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.tags: dict[TagId, Tag] = {}
        self.tag_names: dict[str, TagId] = {}  # canonical name -> id
        self.tag_questions: dict[tuple[TagId, QuestionId], TagQuestion] = {}
        # Serializes transactions, standing in for store isolation
        self.lock = asyncio.Lock()

    def snapshot(self) -> dict[str, Any]:
        return {
            "users": dict(self.users),
            "questions": dict(self.questions),
            "tags": dict(self.tags),
            "tag_names": dict(self.tag_names),
            "tag_questions": dict(self.tag_questions),
        }

    def copy(self) -> "InMemoryStore":
        """Independent store holding the current contents."""
        staged = InMemoryStore()
        staged.restore(self.snapshot())
        return staged

    def restore(self, snapshot: dict[str, Any]) -> None:
        self.users = snapshot["users"]
        self.questions = snapshot["questions"]
        self.tags = snapshot["tags"]
        self.tag_names = snapshot["tag_names"]
        self.tag_questions = snapshot["tag_questions"]
