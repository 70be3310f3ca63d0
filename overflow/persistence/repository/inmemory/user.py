"""In-memory user repository for testing."""

from typing import Optional

from overflow.domain.model.user import User
from overflow.domain.repository.user import UserRepository
from overflow.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find multiple users by ID."""
        return [self.store.users[u] for u in user_ids if u in self.store.users]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self.store.users[user.id] = user
        return user
