"""Local user repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pod.domain.model.local_user import LocalUser
from pod.domain.value import IdentityId, LocalUserId


class LocalUserRepository(ABC):
    """Repository for accounts on this pod."""

    @abstractmethod
    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Find a local user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[LocalUser]:
        """Find a local user by username, ignoring case.

        Args:
            username: The username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_identity_id(
        self, identity_id: IdentityId
    ) -> Optional[LocalUser]:
        """Find the local user claiming an identity.

        Args:
            identity_id: The claimed identity

        Returns:
            The user if the identity is local, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: LocalUser) -> LocalUser:
        """Save a local user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: LocalUserId) -> None:
        """Delete a local user.

        Args:
            user_id: The user to delete
        """
        pass
