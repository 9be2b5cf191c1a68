"""Add contact use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from pod.application.usecase.base import BaseUseCase
from pod.domain.service import ContactService, IdentityResolver
from pod.domain.value import LocalUserId


class AddContactRequest(BaseModel):
    """Add contact request."""

    user_id: str  # From authenticated user
    account_identifier: str
    aspect: str | None = Field(default=None, max_length=255)


class AddContactResponse(BaseModel):
    """Add contact response."""

    contact_id: str
    identity_id: str
    account_identifier: str
    aspect: str | None
    created_at: datetime


class AddContactUseCase(BaseUseCase):
    """Use case for befriending a person by account identifier.

    The person is resolved first, which caches them if they are remote and
    not yet known.
    """

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        contact_service: ContactService,
    ) -> None:
        """Initialize add contact use case.

        Args:
            identity_resolver: Identity resolver
            contact_service: Contact domain service
        """
        self.identity_resolver = identity_resolver
        self.contact_service = contact_service

    async def execute(self, request: AddContactRequest) -> AddContactResponse:
        """Execute add contact flow.

        Raises:
            InvalidIdentifierError: If the identifier is malformed
            ResolutionError: If the person cannot be resolved
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the user adds themself
        """
        identity = await self.identity_resolver.resolve(request.account_identifier)
        contact = await self.contact_service.add_contact(
            LocalUserId(UUID(request.user_id)), identity.id, request.aspect
        )
        return AddContactResponse(
            contact_id=str(contact.id),
            identity_id=str(identity.id),
            account_identifier=identity.account_identifier.root,
            aspect=contact.aspect,
            created_at=contact.created_at,
        )
