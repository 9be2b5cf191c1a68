"""In-memory local user repository for testing."""

from typing import Optional

from pod.domain.model.local_user import LocalUser
from pod.domain.repository.local_user import LocalUserRepository
from pod.domain.value import IdentityId, LocalUserId
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryLocalUserRepository(LocalUserRepository):
    """In-memory implementation of LocalUserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[LocalUser]:
        """Find a user by username, ignoring case."""
        wanted = username.strip().lower()
        for user in self._store.users.values():
            if user.username.lower() == wanted:
                return user
        return None

    async def find_by_identity_id(
        self, identity_id: IdentityId
    ) -> Optional[LocalUser]:
        """Find the user claiming an identity."""
        for user in self._store.users.values():
            if user.identity_id == identity_id:
                return user
        return None

    async def save(self, user: LocalUser) -> LocalUser:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user

    async def delete(self, user_id: LocalUserId) -> None:
        """Delete a user."""
        self._store.users.pop(user_id, None)
