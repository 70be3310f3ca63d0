"""Response models shared by question use cases."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, Field, StringConstraints

from overflow.domain.error import AuthenticationError
from overflow.domain.model import Question, Tag
from overflow.domain.value import UserId

TagNameInput = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=15)
]

QuestionTitle = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=5, max_length=100)
]

QuestionContent = Annotated[str, StringConstraints(min_length=1)]

QuestionTags = Annotated[list[TagNameInput], Field(min_length=1, max_length=3)]


def caller_id(user_id: Optional[str]) -> UserId:
    """Typed caller identity of a request.

    Raises:
        AuthenticationError: If the request carries no usable caller
    """
    if not user_id:
        raise AuthenticationError()
    try:
        return UserId(UUID(user_id))
    except ValueError:
        raise AuthenticationError("Invalid caller identity")


class TagItem(BaseModel):
    """Tag attached to a question."""

    id: str
    name: str
    questions: int


class QuestionResponse(BaseModel):
    """A question with its tags resolved to full records."""

    id: str
    title: str
    content: str
    author_id: str
    tags: list[TagItem]
    views: int
    answers: int
    upvotes: int
    downvotes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, question: Question, tags: list[Tag]) -> "QuestionResponse":
        return cls(
            id=str(question.id),
            title=question.title,
            content=question.content,
            author_id=str(question.author_id),
            tags=[
                TagItem(id=str(tag.id), name=tag.name.root, questions=tag.questions)
                for tag in tags
            ],
            views=question.views,
            answers=question.answers,
            upvotes=question.upvotes,
            downvotes=question.downvotes,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )
