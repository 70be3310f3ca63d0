"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from overflow.domain.model.common import DomainModel
from overflow.domain.value import QuestionId, TagId, UserId


class Question(DomainModel):
    """A question asked by a user.

    ``author_id`` is set once at creation. ``tag_ids`` holds only tags that
    have a live TagQuestion join record for this question; it is a set in
    meaning, its order carries no information.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_id: UserId
    tag_ids: list[TagId] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    answers: int = Field(default=0, ge=0)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def differs_from(self, title: str, content: str) -> bool:
        """Whether applying ``title``/``content`` would change anything."""
        return self.title != title or self.content != content

    def with_content(self, title: str, content: str) -> "Question":
        return self.model_copy(
            update={"title": title, "content": content, "updated_at": datetime.now()}
        )

    def with_tags(self, tag_ids: list[TagId]) -> "Question":
        return self.model_copy(update={"tag_ids": list(tag_ids)})
