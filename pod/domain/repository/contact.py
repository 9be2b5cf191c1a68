"""Contact repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pod.domain.model.contact import Contact
from pod.domain.value import ContactId, IdentityId, LocalUserId


class ContactRepository(ABC):
    """Repository for local users' relationship edges."""

    @abstractmethod
    async def find(
        self, user_id: LocalUserId, identity_id: IdentityId
    ) -> Optional[Contact]:
        """Find the contact between a user and an identity.

        Args:
            user_id: The local user
            identity_id: The contacted identity

        Returns:
            The contact if the edge exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: LocalUserId) -> List[Contact]:
        """Find all contacts of a local user.

        Args:
            user_id: The local user

        Returns:
            List of contacts (may be empty)
        """
        pass

    @abstractmethod
    async def count_referencing(self, identity_id: IdentityId) -> int:
        """Count local users holding a contact to an identity.

        Args:
            identity_id: The contacted identity

        Returns:
            Number of referencing contacts
        """
        pass

    @abstractmethod
    async def save(self, contact: Contact) -> Contact:
        """Save a contact (create or update).

        Args:
            contact: The contact to save

        Returns:
            The saved contact
        """
        pass

    @abstractmethod
    async def delete(self, contact_id: ContactId) -> None:
        """Delete one contact edge.

        Args:
            contact_id: The contact to delete
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: LocalUserId) -> int:
        """Delete every contact held by a local user.

        Args:
            user_id: The local user

        Returns:
            Number of contacts deleted
        """
        pass

    @abstractmethod
    async def delete_referencing(self, identity_id: IdentityId) -> int:
        """Delete every contact naming an identity.

        Args:
            identity_id: The contacted identity

        Returns:
            Number of contacts deleted
        """
        pass
