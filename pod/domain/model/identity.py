"""Identity aggregate root.

An identity is a person addressable across the federation. A pod holds two
kinds: local identities, for which it is authoritative, and cached copies
of remote identities discovered through federation. Both are the same
entity, told apart by ``is_local``.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import Field

from pod.domain.error import ProfileValidationError
from pod.domain.model.common import DomainModel, utcnow
from pod.domain.model.profile import Profile
from pod.domain.value import AccountIdentifier, IdentityId

if TYPE_CHECKING:
    from pod.domain.model.post import Post


class Identity(DomainModel):
    """A person, local or cached-remote.

    Invariants:
    - account_identifier is canonical and unique across the pod
    - exactly one Profile, owned exclusively
    - is_local never changes after creation
    """

    id: IdentityId
    account_identifier: AccountIdentifier
    is_local: bool
    profile: Profile
    url: Optional[str] = None  # Home pod URL
    serialized_public_key: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def field_errors(self) -> dict[str, str]:
        """Validation failures of this identity, keyed by field.

        An identity is valid exactly when its profile is.
        """
        return self.profile.field_errors()

    @property
    def is_valid(self) -> bool:
        return not self.field_errors()

    def validate_profile(self) -> None:
        """Raise for the first failing profile field.

        Raises:
            ProfileValidationError: If the profile is invalid
        """
        for field, message in self.field_errors().items():
            raise ProfileValidationError(field, message)

    def owns(self, post: "Post") -> bool:
        """Whether this identity owns the given post."""
        return post.author_id == self.id
