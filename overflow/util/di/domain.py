"""Domain layer DI providers."""

from dishka import Scope, provide

from overflow.config import AuthSettings
from overflow.domain.repository import (
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from overflow.domain.service import (
    JWTService,
    QuestionService,
    TagService,
    UserService,
)
from overflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services provided here sit on the request-scoped repositories and serve
    read paths. Write paths build their services over the repositories of a
    unit-of-work transaction instead.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
