"""PostgreSQL repository implementations."""

from overflow.persistence.repository.question import PostgresQuestionRepository
from overflow.persistence.repository.tag import PostgresTagRepository
from overflow.persistence.repository.tag_question import PostgresTagQuestionRepository
from overflow.persistence.repository.unit_of_work import PostgresUnitOfWork
from overflow.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresTagQuestionRepository",
    "PostgresTagRepository",
    "PostgresUnitOfWork",
    "PostgresUserRepository",
]
