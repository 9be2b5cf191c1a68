"""Destroy identity use case."""

from uuid import UUID

from pydantic import BaseModel

from pod.application.usecase.base import BaseUseCase
from pod.domain.service import LifecycleService
from pod.domain.value import IdentityId


class DestroyIdentityRequest(BaseModel):
    """Destroy identity request."""

    identity_id: str
    force: bool = False


class DestroyIdentityResponse(BaseModel):
    """Destroy identity response."""

    identity_id: str
    posts_removed: int
    comments_removed: int
    contacts_removed: int
    local_user_removed: bool
    identity_removed: bool


class DestroyIdentityUseCase(BaseUseCase):
    """Use case for deleting a person and the content they own.

    Used for account deletion of local users and for administrative removal
    of cached remote people.
    """

    def __init__(self, lifecycle_service: LifecycleService) -> None:
        """Initialize destroy identity use case.

        Args:
            lifecycle_service: Lifecycle domain service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: DestroyIdentityRequest) -> DestroyIdentityResponse:
        """Execute destroy flow.

        Args:
            request: Identity to destroy and whether to sever others' contacts

        Returns:
            What was removed

        Raises:
            NotFoundError: If the identity does not exist
            BusinessRuleViolationError: If a local identity is still a contact
                of other users and force is not set
            CascadeError: If the cascade failed and was rolled back
        """
        outcome = await self.lifecycle_service.destroy(
            IdentityId(UUID(request.identity_id)), force=request.force
        )
        return DestroyIdentityResponse(
            identity_id=str(outcome.identity_id),
            posts_removed=outcome.posts_removed,
            comments_removed=outcome.comments_removed,
            contacts_removed=outcome.contacts_removed,
            local_user_removed=outcome.local_user_removed,
            identity_removed=outcome.identity_removed,
        )
