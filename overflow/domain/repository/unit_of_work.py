"""Unit of work interface.

A unit of work scopes one store transaction. Repositories handed out by a
transaction all write through the same session, so their changes commit or
roll back together.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from overflow.domain.repository.question import QuestionRepository
from overflow.domain.repository.tag import TagRepository
from overflow.domain.repository.tag_question import TagQuestionRepository


class Transaction:
    """Repositories bound to one open transaction."""

    def __init__(
        self,
        questions: QuestionRepository,
        tags: TagRepository,
        tag_questions: TagQuestionRepository,
    ) -> None:
        self.questions = questions
        self.tags = tags
        self.tag_questions = tag_questions


class UnitOfWork(ABC):
    """Factory for transactions with guaranteed release."""

    @abstractmethod
    def begin(self) -> AbstractAsyncContextManager[Transaction]:
        """Open a transaction.

        Usage:
            async with unit_of_work.begin() as tx:
                await tx.questions.save(question)

        The transaction commits when the block exits normally. Any exception
        rolls it back and propagates; store failures surface as StoreError.
        The underlying session is released on every path.
        """
        pass
