"""Unit tests for CreateQuestionUseCase."""

import asyncio
from contextlib import asynccontextmanager

import pytest

from overflow.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from overflow.domain.error import AuthenticationError, StoreError
from overflow.domain.repository import QuestionRepository, UnitOfWork
from overflow.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTagQuestionRepository,
    InMemoryUnitOfWork,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


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


def question_params(**overrides):
    params = {
        "title": "How do generators work?",
        "content": "What does `yield` actually do?",
        "tags": ["Python", "python", "AI"],
    }
    params.update(overrides)
    return params


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_with_duplicate_casing(self, unit_env):
        """["Python", "python", "AI"] yields two tags, each counted once."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)
        author = make_user()

        # Act
        result = await use_case.run(question_params(), caller=str(author.id))

        # Assert
        assert result.success is True
        assert result.status == 201
        data = result.data
        assert data.author_id == str(author.id)
        assert sorted(t.name for t in data.tags) == ["AI", "Python"]
        assert all(t.questions == 1 for t in data.tags)
        assert len(store.tags) == 2
        assert len(store.tag_questions) == 2

        saved = next(iter(store.questions.values()))
        assert {str(t) for t in saved.tag_ids} == {t.id for t in data.tags}

    @pytest.mark.asyncio
    async def test_second_question_reuses_tag(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)
        author = make_user()
        await use_case.run(question_params(tags=["Python"]), caller=str(author.id))

        # Act
        result = await use_case.run(
            question_params(title="Another python question", tags=["PYTHON"]),
            caller=str(author.id),
        )

        # Assert
        assert result.success is True
        assert [t.name for t in result.data.tags] == ["Python"]
        assert result.data.tags[0].questions == 2
        assert len(store.tags) == 1

    @pytest.mark.asyncio
    async def test_execute_returns_persisted_question(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        request = CreateQuestionRequest(
            title="What is a monad?",
            content="Explain like I'm five.",
            tags=["haskell"],
            user_id=str(author.id),
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        questions = list((await unit_env.get(InMemoryStore)).questions.values())
        assert len(questions) == 1
        saved = await question_repo.find_by_id(questions[0].id)
        assert response.id == str(saved.id)
        assert response.title == "What is a monad?"
        assert [str(t) for t in saved.tag_ids] == [t.id for t in response.tags]

    @pytest.mark.asyncio
    async def test_execute_without_caller_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        request = CreateQuestionRequest(
            title="Who am I?", content="No caller here", tags=["meta"]
        )

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unauthenticated_run_fails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)

        # Act
        result = await use_case.run(question_params())

        # Assert
        assert result.success is False
        assert result.status == 401
        assert store.questions == {}

    @pytest.mark.asyncio
    async def test_malformed_caller_is_unauthenticated(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)

        result = await use_case.run(question_params(), caller="not-a-uuid")

        assert result.success is False
        assert result.status == 401
        assert store.questions == {}
        assert store.tags == {}

    @pytest.mark.asyncio
    async def test_concurrent_creates_count_new_tag_once_each(self, unit_env):
        """Concurrent creates naming one new tag in mixed casing share one tag."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)
        casings = ["Rust", "rust", "RUST", "rUsT"] * 5

        # Act
        results = await asyncio.gather(
            *(
                use_case.run(
                    question_params(title=f"Borrow checker question {i}", tags=[name]),
                    caller=str(make_user().id),
                )
                for i, name in enumerate(casings)
            )
        )

        # Assert
        assert all(result.success for result in results)
        assert len(store.tags) == 1
        tag = next(iter(store.tags.values()))
        assert tag.canonical_name == "rust"
        assert tag.questions == len(casings)
        assert len(store.tag_questions) == len(casings)
        assert len(store.questions) == len(casings)

    @pytest.mark.asyncio
    async def test_concurrent_crossed_tag_orders_all_succeed(self, unit_env):
        """Requests listing shared tags in opposite orders all commit."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)
        orders = [["alpha", "beta"], ["beta", "alpha"]] * 4

        # Act
        results = await asyncio.gather(
            *(
                use_case.run(
                    question_params(title=f"Crossed order {i}", tags=tags),
                    caller=str(make_user().id),
                )
                for i, tags in enumerate(orders)
            )
        )

        # Assert
        assert all(result.success for result in results)
        assert sorted(t.questions for t in store.tags.values()) == [8, 8]
        assert len(store.tag_questions) == 16

    @pytest.mark.asyncio
    async def test_user_id_in_params_is_ignored(self, unit_env):
        """Callers cannot pick the author by sending user_id."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        caller, impostor = make_user(), make_user()

        # Act
        result = await use_case.run(
            question_params(user_id=str(impostor.id)), caller=str(caller.id)
        )

        # Assert
        assert result.success is True
        assert result.data.author_id == str(caller.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"title": "Hey"}, "title"),
            ({"title": "x" * 101}, "title"),
            ({"content": ""}, "content"),
            ({"tags": []}, "tags"),
            ({"tags": ["a", "b", "c", "d"]}, "tags"),
            ({"tags": ["x" * 16]}, "tags.0"),
        ],
    )
    async def test_invalid_params_rejected(self, unit_env, overrides, field):
        """Shape and range violations fail with per-field details."""
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        store = await unit_env.get(InMemoryStore)

        # Act
        result = await use_case.run(
            question_params(**overrides), caller=str(make_user().id)
        )

        # Assert
        assert result.success is False
        assert result.status == 400
        assert field in result.error.details
        assert store.questions == {}
        assert store.tags == {}

    @pytest.mark.asyncio
    async def test_failure_after_tag_resolution_rolls_back(self):
        """A failing join-record insert leaves no question, tag or counter behind."""
        # Arrange
        store = InMemoryStore()
        use_case = CreateQuestionUseCase(unit_of_work=FailingUnitOfWork(store))

        # Act
        result = await use_case.run(question_params(), caller=str(make_user().id))

        # Assert
        assert result.success is False
        assert result.status == 500
        assert store.questions == {}
        assert store.tags == {}
        assert store.tag_questions == {}

    @pytest.mark.asyncio
    async def test_failure_keeps_existing_counters(self, unit_env):
        """Counters of pre-existing tags are not left incremented after a failure."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        ok = await unit_env.get(CreateQuestionUseCase)
        await ok.run(question_params(tags=["python"]), caller=str(make_user().id))
        failing = CreateQuestionUseCase(unit_of_work=FailingUnitOfWork(store))

        # Act
        result = await failing.run(
            question_params(tags=["python"]), caller=str(make_user().id)
        )

        # Assert
        assert result.success is False
        assert len(store.questions) == 1
        assert next(iter(store.tags.values())).questions == 1


class TestCreateQuestionWiring:
    """DI wiring for the create question use case."""

    @pytest.mark.asyncio
    async def test_uses_shared_store(self, unit_env):
        # Act
        uow = await unit_env.get(UnitOfWork)
        store = await unit_env.get(InMemoryStore)

        # Assert
        assert isinstance(uow, InMemoryUnitOfWork)
        assert uow.store is store
