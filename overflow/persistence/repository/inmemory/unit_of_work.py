"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from overflow.domain.repository import Transaction, UnitOfWork

from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .tag_question import InMemoryTagQuestionRepository


class InMemoryUnitOfWork(UnitOfWork):
    """Staged transactions over an InMemoryStore.

    Transactions are serialized by the store lock. Their repositories write
    to a private copy of the store, which replaces the live contents only
    when the block completes, so readers outside the transaction never see
    a partial write.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.committed = 0
        self.rolled_back = 0

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[Transaction]:
        async with self.store.lock:
            staged = self.store.copy()
            try:
                yield Transaction(
                    questions=InMemoryQuestionRepository(staged),
                    tags=InMemoryTagRepository(staged),
                    tag_questions=InMemoryTagQuestionRepository(staged),
                )
            except BaseException:
                # CancelledError included; the staged copy is discarded
                self.rolled_back += 1
                raise
            self.store.restore(staged.snapshot())
            self.committed += 1
