"""Contact domain service."""

from uuid import uuid4

import logfire

from pod.domain.error import BusinessRuleViolationError, NotFoundError
from pod.domain.model import Contact, utcnow
from pod.domain.repository import (
    ContactRepository,
    IdentityRepository,
    LocalUserRepository,
)
from pod.domain.value import ContactId, IdentityId, LocalUserId

from .base import Service


class ContactService(Service):
    """Domain service for local users' contacts.

    Removing a contact only drops the edge. The identity on the other end
    stays in the store whether or not anyone else still references it.
    """

    def __init__(
        self,
        contact_repository: ContactRepository,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
    ) -> None:
        self.contact_repository = contact_repository
        self.identity_repository = identity_repository
        self.local_user_repository = local_user_repository

    async def add_contact(
        self,
        user_id: LocalUserId,
        identity_id: IdentityId,
        aspect: str | None = None,
    ) -> Contact:
        """Connect a local user to an identity.

        Adding an existing contact again returns the existing edge.

        Args:
            user_id: The local user
            identity_id: The identity to connect to
            aspect: Optional aspect name

        Returns:
            The contact

        Raises:
            NotFoundError: If the user or identity does not exist
            BusinessRuleViolationError: If the user targets their own identity
        """
        with logfire.span(
            "contact_service.add_contact",
            user_id=str(user_id),
            identity_id=str(identity_id),
        ):
            user = await self.local_user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("LocalUser", str(user_id))
            if user.identity_id == identity_id:
                raise BusinessRuleViolationError("Cannot add yourself as a contact")
            if not await self.identity_repository.find_by_id(identity_id):
                raise NotFoundError("Identity", str(identity_id))

            existing = await self.contact_repository.find(user_id, identity_id)
            if existing:
                return existing

            contact = Contact(
                id=ContactId(uuid4()),
                user_id=user_id,
                identity_id=identity_id,
                aspect=aspect,
                created_at=utcnow(),
            )
            saved = await self.contact_repository.save(contact)
            logfire.info(
                "Contact added",
                contact_id=str(saved.id),
                user_id=str(user_id),
                identity_id=str(identity_id),
            )
            return saved

    async def remove_contact(self, user_id: LocalUserId, identity_id: IdentityId) -> bool:
        """Disconnect a local user from an identity.

        Args:
            user_id: The local user
            identity_id: The contacted identity

        Returns:
            True if an edge was removed, False if there was none
        """
        with logfire.span(
            "contact_service.remove_contact",
            user_id=str(user_id),
            identity_id=str(identity_id),
        ):
            contact = await self.contact_repository.find(user_id, identity_id)
            if not contact:
                return False

            await self.contact_repository.delete(contact.id)
            remaining = await self.contact_repository.count_referencing(identity_id)
            logfire.info(
                "Contact removed",
                user_id=str(user_id),
                identity_id=str(identity_id),
                orphaned=remaining == 0,
            )
            return True

    async def get_contacts(self, user_id: LocalUserId) -> list[Contact]:
        """List a local user's contacts."""
        return await self.contact_repository.find_by_user(user_id)
