"""Identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pod.domain.model.identity import Identity
from pod.domain.value import AccountIdentifier, IdentityId


class IdentityRepository(ABC):
    """Store adapter for the Identity aggregate.

    An identity and its profile are always written and deleted together.
    Implementations must enforce account identifier uniqueness atomically:
    two concurrent creates with the same identifier yield exactly one
    success and one UniquenessViolation.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_identifier(
        self, account_identifier: AccountIdentifier
    ) -> Optional[Identity]:
        """Find an identity by exact canonical account identifier.

        Never fuzzy: ``tom@pod.example`` does not match ``tomtom@pod.example``.

        Args:
            account_identifier: Canonical account identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_with_identifier(
        self,
        account_identifier: AccountIdentifier,
        excluding: Optional[IdentityId] = None,
    ) -> bool:
        """Check whether another identity already uses an identifier.

        Args:
            account_identifier: Canonical account identifier
            excluding: Identity to ignore (the one being updated)

        Returns:
            True if a different identity holds the identifier
        """
        pass

    @abstractmethod
    async def create(self, identity: Identity) -> Identity:
        """Persist a new identity together with its profile.

        Args:
            identity: The identity to create

        Returns:
            The created identity

        Raises:
            UniquenessViolation: If the account identifier is taken
        """
        pass

    @abstractmethod
    async def update(self, identity: Identity) -> Identity:
        """Update an existing identity and replace its profile.

        Args:
            identity: The identity to update

        Returns:
            The updated identity

        Raises:
            UniquenessViolation: If the account identifier collides with
                a different identity
            NotFoundError: If the identity does not exist
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: IdentityId) -> None:
        """Delete an identity and its profile.

        Args:
            identity_id: The identity to delete
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all identities, local and remote.

        Returns:
            Number of stored identities
        """
        pass
