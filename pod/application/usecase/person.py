"""Person representation shared by use case responses."""

from datetime import datetime

from pydantic import BaseModel

from pod.domain.model import Identity


class PersonResponse(BaseModel):
    """A person as returned to callers."""

    identity_id: str
    account_identifier: str
    is_local: bool
    first_name: str | None
    last_name: str | None
    full_name: str
    image_url: str | None
    bio: str | None
    url: str | None
    updated_at: datetime

    @classmethod
    def from_identity(cls, identity: Identity) -> "PersonResponse":
        profile = identity.profile
        return cls(
            identity_id=str(identity.id),
            account_identifier=identity.account_identifier.root,
            is_local=identity.is_local,
            first_name=profile.first_name,
            last_name=profile.last_name,
            full_name=profile.full_name,
            image_url=profile.image_url,
            bio=profile.bio,
            url=identity.url,
            updated_at=identity.updated_at,
        )
