"""Provision local user use case."""

from pydantic import BaseModel, Field

from pod.application.usecase.base import BaseUseCase
from pod.application.usecase.person import PersonResponse
from pod.domain.model import Profile
from pod.domain.service import IdentityService


class ProvisionLocalUserRequest(BaseModel):
    """Provision local user request."""

    username: str = Field(min_length=1, max_length=255)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    image_url: str | None = None
    bio: str | None = None


class ProvisionLocalUserResponse(BaseModel):
    """Provision local user response."""

    user_id: str
    username: str
    person: PersonResponse


class ProvisionLocalUserUseCase(BaseUseCase):
    """Use case for signing up a user on this pod.

    Creates the account, its local identity and the profile in one step.
    The identity's account identifier is ``username@<pod host>``.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize provision local user use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(
        self, request: ProvisionLocalUserRequest
    ) -> ProvisionLocalUserResponse:
        """Execute provisioning flow.

        Args:
            request: Username and initial profile fields

        Returns:
            The new user and person

        Raises:
            InvalidIdentifierError: If the username cannot form an identifier
            ProfileValidationError: If the first name is blank
            UniquenessViolation: If the username is taken
        """
        profile = Profile(
            first_name=request.first_name,
            last_name=request.last_name,
            image_url=request.image_url,
            bio=request.bio,
        )
        user, identity = await self.identity_service.provision_local_user(
            request.username, profile
        )
        return ProvisionLocalUserResponse(
            user_id=str(user.id),
            username=user.username,
            person=PersonResponse.from_identity(identity),
        )
