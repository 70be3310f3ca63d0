"""PostgreSQL unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from overflow.domain.error import StoreError
from overflow.domain.repository import Transaction, UnitOfWork
from overflow.persistence.repository.question import PostgresQuestionRepository
from overflow.persistence.repository.tag import PostgresTagRepository
from overflow.persistence.repository.tag_question import PostgresTagQuestionRepository


class PostgresUnitOfWork(UnitOfWork):
    """Opens one session per transaction from the shared session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize unit of work.

        Args:
            session_factory: Factory for creating database sessions
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[Transaction]:
        """Open a session, yield bound repositories, then commit or roll back.

        The session is closed when the block exits, whatever the outcome.
        """
        async with self.session_factory() as session:
            transaction = Transaction(
                questions=PostgresQuestionRepository(session),
                tags=PostgresTagRepository(session),
                tag_questions=PostgresTagQuestionRepository(session),
            )
            try:
                yield transaction
                await session.commit()
                logfire.info("Transaction committed")
            except Exception as e:
                logfire.warn(
                    "Transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                if isinstance(e, SQLAlchemyError):
                    raise StoreError("Transaction failed") from e
                raise
