"""Unit tests for EditQuestionUseCase."""

from contextlib import asynccontextmanager
from uuid import UUID, uuid4

import pytest

from overflow.application.usecase.question import (
    CreateQuestionUseCase,
    EditQuestionRequest,
    EditQuestionUseCase,
)
from overflow.domain.error import NotAuthorizedError, NotFoundError, StoreError
from overflow.domain.value import QuestionId
from overflow.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTagQuestionRepository,
    InMemoryUnitOfWork,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

TITLE = "Which systems language should I learn?"
CONTENT = "Weighing up the options for a hobby project."


class FailingTagQuestionRepository(InMemoryTagQuestionRepository):
    """Join record repository whose bulk insert always fails."""

    async def insert_many(self, records):
        raise StoreError("tag_questions insert failed")


class FailingUnitOfWork(InMemoryUnitOfWork):
    """Unit of work whose transactions fail when join records are written."""

    @asynccontextmanager
    async def begin(self):
        async with super().begin() as tx:
            tx.tag_questions = FailingTagQuestionRepository(tx.tag_questions.store)
            yield tx


async def ask(unit_env, author_id: str, tags: list[str]):
    """Create a question through the use case and return its response."""
    use_case = await unit_env.get(CreateQuestionUseCase)
    result = await use_case.run(
        {"title": TITLE, "content": CONTENT, "tags": tags}, caller=author_id
    )
    assert result.success, result.error
    return result.data


def tag_counts(store: InMemoryStore) -> dict[str, int]:
    return {t.canonical_name: t.questions for t in store.tags.values()}


class TestEditQuestionUseCase:
    """Tests for EditQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_go_rust_to_rust_wasm(self, unit_env):
        """Editing {go, rust} to {rust, wasm} releases go and adds wasm."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(EditQuestionUseCase)
        author = str(make_user().id)
        created = await ask(unit_env, author, ["go", "rust"])

        # Act
        result = await use_case.run(
            {
                "question_id": created.id,
                "title": TITLE,
                "content": CONTENT,
                "tags": ["rust", "wasm"],
            },
            caller=author,
        )

        # Assert
        assert result.success is True
        assert sorted(t.name for t in result.data.tags) == ["rust", "wasm"]
        assert tag_counts(store) == {"go": 0, "rust": 1, "wasm": 1}

        question = store.questions[QuestionId(UUID(created.id))]
        linked = {tag_id for tag_id, _ in store.tag_questions}
        assert linked == set(question.tag_ids)
        assert {store.tags[t].canonical_name for t in question.tag_ids} == {
            "rust",
            "wasm",
        }

    @pytest.mark.asyncio
    async def test_content_change_updates_timestamp(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(EditQuestionUseCase)
        author = str(make_user().id)
        created = await ask(unit_env, author, ["go"])

        # Act
        result = await use_case.run(
            {
                "question_id": created.id,
                "title": "Is Go a good first systems language?",
                "content": CONTENT,
                "tags": ["go"],
            },
            caller=author,
        )

        # Assert
        assert result.success is True
        assert result.data.title == "Is Go a good first systems language?"
        assert result.data.updated_at > created.updated_at
        assert tag_counts(store) == {"go": 1}

    @pytest.mark.asyncio
    async def test_unchanged_edit_writes_nothing_new(self, unit_env):
        """Same title, content and tags (in another casing) change nothing."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(EditQuestionUseCase)
        author = str(make_user().id)
        created = await ask(unit_env, author, ["Go", "Rust"])
        links_before = dict(store.tag_questions)

        # Act
        result = await use_case.run(
            {
                "question_id": created.id,
                "title": TITLE,
                "content": CONTENT,
                "tags": ["go", "RUST"],
            },
            caller=author,
        )

        # Assert
        assert result.success is True
        assert result.data.updated_at == created.updated_at
        assert tag_counts(store) == {"go": 1, "rust": 1}
        assert store.tag_questions == links_before
        assert [t.name for t in result.data.tags] == ["Go", "Rust"]

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(EditQuestionUseCase)
        author = str(make_user().id)
        created = await ask(unit_env, author, ["go"])

        # Act
        result = await use_case.run(
            {
                "question_id": created.id,
                "title": "Hijacked title here",
                "content": CONTENT,
                "tags": ["spam"],
            },
            caller=str(make_user().id),
        )

        # Assert
        assert result.success is False
        assert result.status == 403
        assert tag_counts(store) == {"go": 1}
        question = next(iter(store.questions.values()))
        assert question.title == TITLE

    @pytest.mark.asyncio
    async def test_execute_non_author_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditQuestionUseCase)
        created = await ask(unit_env, str(make_user().id), ["go"])
        request = EditQuestionRequest(
            question_id=created.id,
            title=TITLE,
            content=CONTENT,
            tags=["go"],
            user_id=str(make_user().id),
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditQuestionUseCase)
        request = EditQuestionRequest(
            question_id=uuid4(),
            title=TITLE,
            content=CONTENT,
            tags=["go"],
            user_id=str(make_user().id),
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_missing_question_envelope(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditQuestionUseCase)

        # Act
        result = await use_case.run(
            {
                "question_id": str(uuid4()),
                "title": TITLE,
                "content": CONTENT,
                "tags": ["go"],
            },
            caller=str(make_user().id),
        )

        # Assert
        assert result.success is False
        assert result.status == 404

    @pytest.mark.asyncio
    async def test_invalid_question_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditQuestionUseCase)

        # Act
        result = await use_case.run(
            {"question_id": "not-a-uuid", "title": TITLE, "content": CONTENT, "tags": ["go"]},
            caller=str(make_user().id),
        )

        # Assert
        assert result.success is False
        assert result.status == 400
        assert "question_id" in result.error.details

    @pytest.mark.asyncio
    async def test_failed_edit_leaves_everything_unchanged(self, unit_env):
        """A store failure mid-edit rolls back content, counters and links."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        author = str(make_user().id)
        created = await ask(unit_env, author, ["go", "rust"])
        question_before = next(iter(store.questions.values()))
        links_before = dict(store.tag_questions)
        use_case = EditQuestionUseCase(unit_of_work=FailingUnitOfWork(store))

        # Act
        result = await use_case.run(
            {
                "question_id": created.id,
                "title": "A completely new title",
                "content": "And new content too",
                "tags": ["rust", "wasm"],
            },
            caller=author,
        )

        # Assert
        assert result.success is False
        assert result.status == 500
        assert tag_counts(store) == {"go": 1, "rust": 1}
        assert store.tag_questions == links_before
        assert next(iter(store.questions.values())) == question_before
