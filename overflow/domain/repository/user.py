"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.user import User
from overflow.domain.value import UserId


class UserRepository(ABC):
    """Read access to users, plus ``save`` for seeding."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find multiple users by ID in a single query."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
