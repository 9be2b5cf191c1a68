"""In-memory contact repository for testing."""

from typing import List, Optional

from pod.domain.model.contact import Contact
from pod.domain.repository.contact import ContactRepository
from pod.domain.value import ContactId, IdentityId, LocalUserId
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryContactRepository(ContactRepository):
    """In-memory implementation of ContactRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find(
        self, user_id: LocalUserId, identity_id: IdentityId
    ) -> Optional[Contact]:
        """Find the contact between a user and an identity."""
        for contact in self._store.contacts.values():
            if contact.user_id == user_id and contact.identity_id == identity_id:
                return contact
        return None

    async def find_by_user(self, user_id: LocalUserId) -> List[Contact]:
        """Find contacts of a user."""
        contacts = [c for c in self._store.contacts.values() if c.user_id == user_id]
        contacts.sort(key=lambda c: c.created_at)
        return contacts

    async def count_referencing(self, identity_id: IdentityId) -> int:
        """Count contacts naming an identity."""
        return sum(
            1 for c in self._store.contacts.values() if c.identity_id == identity_id
        )

    async def save(self, contact: Contact) -> Contact:
        """Save or update a contact."""
        self._store.contacts[contact.id] = contact
        return contact

    async def delete(self, contact_id: ContactId) -> None:
        """Delete one contact."""
        self._store.contacts.pop(contact_id, None)

    async def delete_by_user(self, user_id: LocalUserId) -> int:
        """Delete contacts held by a user."""
        doomed = [cid for cid, c in self._store.contacts.items() if c.user_id == user_id]
        for contact_id in doomed:
            del self._store.contacts[contact_id]
        return len(doomed)

    async def delete_referencing(self, identity_id: IdentityId) -> int:
        """Delete contacts naming an identity."""
        doomed = [
            cid
            for cid, c in self._store.contacts.items()
            if c.identity_id == identity_id
        ]
        for contact_id in doomed:
            del self._store.contacts[contact_id]
        return len(doomed)
