"""Resolve identity use case."""

from pydantic import BaseModel

from pod.application.usecase.base import BaseUseCase
from pod.application.usecase.person import PersonResponse
from pod.domain.service import IdentityResolver


class ResolveIdentityRequest(BaseModel):
    """Resolve identity request."""

    account_identifier: str
    local_only: bool = False
    allow_remote: bool = True


class ResolveIdentityUseCase(BaseUseCase):
    """Look up a person by account identifier.

    With ``local_only`` only people hosted on this pod are returned; this is
    what sign-in and WebFinger answers for our own users go through.
    """

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        self.identity_resolver = identity_resolver

    async def execute(self, request: ResolveIdentityRequest) -> PersonResponse:
        """Execute resolve flow.

        Raises:
            InvalidIdentifierError: If the identifier is malformed
            ResolutionError: If nobody answers to the identifier
        """
        if request.local_only:
            identity = await self.identity_resolver.resolve_local(
                request.account_identifier
            )
        else:
            identity = await self.identity_resolver.resolve(
                request.account_identifier, allow_remote=request.allow_remote
            )
        return PersonResponse.from_identity(identity)
