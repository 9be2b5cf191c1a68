"""Contact entity.

A contact is one edge of a local user's social graph: the user is
connected to an identity, optionally filed under an aspect.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pod.domain.model.common import DomainModel, utcnow
from pod.domain.value import ContactId, IdentityId, LocalUserId


class Contact(DomainModel):
    """Relationship from a local user to an identity.

    At most one contact per (user, identity) pair.
    """

    id: ContactId
    user_id: LocalUserId
    identity_id: IdentityId
    aspect: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
