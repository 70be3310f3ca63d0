"""Domain model entities for Overflow."""

from overflow.domain.model.question import Question
from overflow.domain.model.tag import Tag
from overflow.domain.model.tag_question import TagQuestion
from overflow.domain.model.user import User

__all__ = [
    "Question",
    "Tag",
    "TagQuestion",
    "User",
]
