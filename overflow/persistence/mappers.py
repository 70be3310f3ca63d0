"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from overflow.domain.model import Question, Tag, TagQuestion, User
from overflow.domain.value import QuestionId, TagId, TagName, UserId


def _as_uuid(value: UUID | str) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=row["name"],
        username=row["username"],
        image=row.get("image"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        name=TagName(row["name"]),
        questions=row["questions"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Adds the canonical name column used for case-insensitive uniqueness.
    """
    data = tag.model_dump()
    data["canonical_name"] = tag.canonical_name
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_as_uuid(row["author_id"])),
        tag_ids=[TagId(_as_uuid(tag_id)) for tag_id in row.get("tag_ids") or []],
        views=row["views"],
        answers=row["answers"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def tag_question_to_dict(record: TagQuestion) -> Dict[str, Any]:
    """Convert TagQuestion join record to database dict."""
    return record.model_dump()
