"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from pod.application.usecase.base import BaseUseCase
from pod.application.usecase.person import PersonResponse
from pod.domain.service import IdentityService
from pod.domain.value import IdentityId


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Omitted fields keep their current value.
    """

    identity_id: str
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    image_url: str | None = None
    bio: str | None = Field(default=None, max_length=5000)


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing a local person's profile."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: UpdateProfileRequest) -> PersonResponse:
        """Execute update profile flow.

        Steps:
        1. Load the identity
        2. Merge the supplied fields into its profile
        3. Validate and save

        Raises:
            NotFoundError: If the identity does not exist
            BusinessRuleViolationError: If the identity is remote
            ProfileValidationError: If the resulting profile is invalid
        """
        identity_id = IdentityId(UUID(request.identity_id))
        identity = await self.identity_service.get_by_id(identity_id)

        changes = request.model_dump(exclude={"identity_id"}, exclude_unset=True)
        profile = identity.profile.model_copy(update=changes)

        saved = await self.identity_service.update_profile(identity_id, profile)
        return PersonResponse.from_identity(saved)
