"""User domain service."""

import logfire

from overflow.domain.model import User
from overflow.domain.repository import UserRepository
from overflow.domain.value import UserId


class UserService:
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID.

        Unknown IDs are simply absent from the result.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_users_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            found = {user.id: user for user in users}
            if len(found) < len(unique_ids):
                logfire.warn(
                    "Some users not found",
                    requested=len(unique_ids),
                    found=len(found),
                )
            return found
