"""Domain value objects for Overflow.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from overflow.domain.value.common import RootValueObject


class TagName(RootValueObject[str]):
    """Tag name as typed by the user.

    The display casing is kept as supplied; identity is the lowercase
    ``canonical`` form, so 'Python' and 'python' name the same tag.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Strip surrounding whitespace and check length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 30:
            raise ValueError("Tag name must be 1-30 characters")
        return v

    @property
    def canonical(self) -> str:
        """Case-insensitive identity key."""
        return self.root.lower()


class SearchFilter(str, Enum):
    """Named orderings accepted by paginated listings."""

    POPULAR = "popular"  # Most-used first
    RECENT = "recent"  # Newest first
    OLDEST = "oldest"  # Oldest first
    NAME = "name"  # Alphabetical


class SortDirection(str, Enum):
    """Explicit sort direction override."""

    ASC = "asc"
    DESC = "desc"
