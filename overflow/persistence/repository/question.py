"""PostgreSQL implementation of Question repository."""

from typing import Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.error import NotFoundError
from overflow.domain.model import Question
from overflow.domain.repository.question import QuestionRepository
from overflow.domain.value import QuestionId, TagId
from overflow.persistence.database import store_operation
from overflow.persistence.mappers import question_to_dict, row_to_question
from overflow.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _tag_filter(self, stmt, tag_id: TagId, search: Optional[str]):
        # tag_ids @> ARRAY[tag_id], served by the GIN index
        stmt = stmt.where(questions_table.c.tag_ids.contains([tag_id]))
        if search:
            stmt = stmt.where(
                questions_table.c.title.icontains(search, autoescape=True)
            )
        return stmt

    @store_operation
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            return row_to_question(dict(row))

    @store_operation
    async def create(self, question: Question) -> Optional[Question]:
        """Insert a new question and read it back."""
        with logfire.span(
            "question_repository.create",
            question_id=str(question.id),
            title=question.title,
            author_id=str(question.author_id),
        ):
            stmt = (
                insert(questions_table)
                .values(**question_to_dict(question))
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    @store_operation
    async def save(self, question: Question) -> Question:
        """Persist title, content, tag_ids and updated_at."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tag_ids=[str(t) for t in question.tag_ids],
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question.id)
                .values(
                    title=question.title,
                    content=question.content,
                    tag_ids=list(question.tag_ids),
                    updated_at=question.updated_at,
                )
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if row is None:
                logfire.warn("Question vanished during save", question_id=str(question.id))
                raise NotFoundError("Question", str(question.id))

            return row_to_question(dict(row))

    @store_operation
    async def find_by_tag(
        self,
        tag_id: TagId,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions carrying a tag, newest first."""
        with logfire.span(
            "question_repository.find_by_tag",
            tag_id=str(tag_id),
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._tag_filter(select(questions_table), tag_id, search)
            stmt = (
                stmt.order_by(desc(questions_table.c.created_at), questions_table.c.id)
                .offset(offset)
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            questions = [row_to_question(dict(row)) for row in result.mappings()]
            logfire.info("Found questions for tag", count=len(questions))
            return questions

    @store_operation
    async def count_by_tag(self, tag_id: TagId, search: Optional[str] = None) -> int:
        """Count questions carrying a tag."""
        stmt = self._tag_filter(
            select(func.count()).select_from(questions_table), tag_id, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
