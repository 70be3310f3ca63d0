"""Repository interfaces for the Overflow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from overflow.domain.repository.question import QuestionRepository
from overflow.domain.repository.tag import TagRepository
from overflow.domain.repository.tag_question import TagQuestionRepository
from overflow.domain.repository.unit_of_work import Transaction, UnitOfWork
from overflow.domain.repository.user import UserRepository

__all__ = [
    "QuestionRepository",
    "TagQuestionRepository",
    "TagRepository",
    "Transaction",
    "UnitOfWork",
    "UserRepository",
]
