"""In-memory identity repository for testing."""

from typing import Optional

from pod.domain.error import NotFoundError, UniquenessViolation
from pod.domain.model.identity import Identity
from pod.domain.repository.identity import IdentityRepository
from pod.domain.value import AccountIdentifier, IdentityId
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing.

    The uniqueness check and the insert run without an intervening await,
    so concurrent creates on one event loop cannot both succeed.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _holder_of(self, account_identifier: AccountIdentifier) -> Optional[Identity]:
        for identity in self._store.identities.values():
            if identity.account_identifier == account_identifier:
                return identity
        return None

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find identity by ID."""
        return self._store.identities.get(identity_id)

    async def find_by_identifier(
        self, account_identifier: AccountIdentifier
    ) -> Optional[Identity]:
        """Find identity by canonical account identifier."""
        return self._holder_of(account_identifier)

    async def exists_with_identifier(
        self,
        account_identifier: AccountIdentifier,
        excluding: Optional[IdentityId] = None,
    ) -> bool:
        """Check whether a different identity holds the identifier."""
        holder = self._holder_of(account_identifier)
        return holder is not None and holder.id != excluding

    async def create(self, identity: Identity) -> Identity:
        """Create identity, enforcing identifier uniqueness."""
        if identity.id in self._store.identities or self._holder_of(
            identity.account_identifier
        ):
            raise UniquenessViolation(identity.account_identifier.root)
        self._store.identities[identity.id] = identity
        return identity

    async def update(self, identity: Identity) -> Identity:
        """Update identity, enforcing identifier uniqueness."""
        if identity.id not in self._store.identities:
            raise NotFoundError("Identity", str(identity.id))
        holder = self._holder_of(identity.account_identifier)
        if holder is not None and holder.id != identity.id:
            raise UniquenessViolation(identity.account_identifier.root)
        self._store.identities[identity.id] = identity
        return identity

    async def delete(self, identity_id: IdentityId) -> None:
        """Delete identity (and with it, its profile)."""
        self._store.identities.pop(identity_id, None)

    async def count(self) -> int:
        """Count identities."""
        return len(self._store.identities)
