"""Application layer DI providers."""

from dishka import Scope, provide

from overflow.application.usecase.question import (
    CreateQuestionUseCase,
    EditQuestionUseCase,
    GetQuestionUseCase,
)
from overflow.application.usecase.tag import GetTagQuestionsUseCase, ListTagsUseCase
from overflow.domain.repository import UnitOfWork
from overflow.domain.service import QuestionService, TagService, UserService
from overflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, unit_of_work: UnitOfWork
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_edit_question_use_case(self, unit_of_work: UnitOfWork) -> EditQuestionUseCase:
        """Provide edit question use case."""
        return EditQuestionUseCase(unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, tag_service: TagService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, tag_service=tag_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tag_questions_use_case(
        self,
        tag_service: TagService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> GetTagQuestionsUseCase:
        """Provide get tag questions use case."""
        return GetTagQuestionsUseCase(
            tag_service=tag_service,
            question_service=question_service,
            user_service=user_service,
        )
