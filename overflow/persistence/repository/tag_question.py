"""PostgreSQL implementation of TagQuestion repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model.tag_question import TagQuestion
from overflow.domain.repository.tag_question import TagQuestionRepository
from overflow.domain.value import QuestionId, TagId
from overflow.persistence.database import store_operation
from overflow.persistence.mappers import tag_question_to_dict
from overflow.persistence.tables import tag_questions_table


class PostgresTagQuestionRepository(TagQuestionRepository):
    """PostgreSQL implementation of TagQuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def insert_many(self, records: list[TagQuestion]) -> None:
        """Bulk insert join records (executemany)."""
        if not records:
            return

        await self.session.execute(
            insert(tag_questions_table),
            [tag_question_to_dict(record) for record in records],
        )

    @store_operation
    async def delete_many(self, question_id: QuestionId, tag_ids: list[TagId]) -> None:
        """Bulk delete the join records of one question."""
        if not tag_ids:
            return

        stmt = delete(tag_questions_table).where(
            tag_questions_table.c.question_id == question_id,
            tag_questions_table.c.tag_id.in_(tag_ids),
        )
        await self.session.execute(stmt)

    @store_operation
    async def find_by_question(self, question_id: QuestionId) -> list[TagQuestion]:
        """List join records of a question."""
        stmt = select(tag_questions_table).where(
            tag_questions_table.c.question_id == question_id
        )
        result = await self.session.execute(stmt)
        return [
            TagQuestion(
                tag_id=TagId(row["tag_id"]),
                question_id=QuestionId(row["question_id"]),
                created_at=row["created_at"],
            )
            for row in result.mappings()
        ]
