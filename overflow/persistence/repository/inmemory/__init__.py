"""In-memory repository implementations for testing."""

from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .tag_question import InMemoryTagQuestionRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryTagQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
