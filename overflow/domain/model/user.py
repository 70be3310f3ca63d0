"""User entity.

Users are managed by the authentication front end; this service only reads
them to project question authors.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from overflow.domain.model.common import DomainModel
from overflow.domain.value import UserId


class User(DomainModel):
    """A registered user."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
