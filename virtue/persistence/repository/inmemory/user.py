"""In-memory user repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from virtue.domain.model import User
from virtue.domain.repository import UserRepository
from virtue.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        return [
            self._store.users[user_id]
            for user_id in set(user_ids)
            if user_id in self._store.users
        ]

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by identity provider id."""
        for user in self._store.users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If external id or email belongs to another user
        """
        for other in self._store.users.values():
            if other.id == user.id:
                continue
            if other.external_id == user.external_id or (
                user.email and other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        self._store.users[user.id] = user
        return user
