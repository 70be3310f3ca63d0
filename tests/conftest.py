"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from overflow.domain.model import Question, Tag, User
from overflow.domain.value import QuestionId, TagId, TagName, UserId

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "Ada Lovelace", username: str | None = None) -> User:
    """Build a user with a unique username."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        username=username or f"user-{str(user_id)[:8]}",
        image="https://example.com/avatar.png",
    )


def make_tag(name: str, questions: int = 0, age_days: int = 0) -> Tag:
    """Build a tag created ``age_days`` ago."""
    created = datetime.now() - timedelta(days=age_days)
    return Tag(
        id=TagId(uuid4()),
        name=TagName(name),
        questions=questions,
        created_at=created,
        updated_at=created,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list?",
    tag_ids: list[TagId] | None = None,
    age_minutes: int = 0,
) -> Question:
    """Build a question created ``age_minutes`` ago."""
    created = datetime.now() - timedelta(minutes=age_minutes)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content="I tried `reversed()` but got an iterator back.",
        author_id=author_id,
        tag_ids=tag_ids or [],
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def author() -> User:
    return make_user()
