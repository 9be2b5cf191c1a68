"""Remove contact use case."""

from uuid import UUID

from pydantic import BaseModel

from pod.application.usecase.base import BaseUseCase
from pod.domain.service import LifecycleService
from pod.domain.value import IdentityId, LocalUserId


class RemoveContactRequest(BaseModel):
    """Remove contact request."""

    user_id: str  # From authenticated user
    identity_id: str


class RemoveContactResponse(BaseModel):
    """Remove contact response."""

    removed: bool


class RemoveContactUseCase(BaseUseCase):
    """Use case for unfriending a person.

    Only the edge goes away; the person stays known to the pod.
    """

    def __init__(self, lifecycle_service: LifecycleService) -> None:
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: RemoveContactRequest) -> RemoveContactResponse:
        removed = await self.lifecycle_service.sever_relationship(
            LocalUserId(UUID(request.user_id)),
            IdentityId(UUID(request.identity_id)),
        )
        return RemoveContactResponse(removed=removed)
