"""Tag entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from overflow.domain.model.common import DomainModel
from overflow.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    Tags are created lazily the first time a question uses the name and are
    never deleted. ``questions`` counts the live join records pointing at the
    tag, so it can drop to zero and stay there.
    """

    id: TagId
    name: TagName  # Display casing of the first occurrence
    questions: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def canonical_name(self) -> str:
        return self.name.canonical
