"""Local user entity.

A local user is an account on this pod. Each one claims exactly one local
identity; the claim is what makes that identity local.
"""

from datetime import datetime

from pydantic import Field

from pod.domain.model.common import DomainModel, utcnow
from pod.domain.value import IdentityId, LocalUserId


class LocalUser(DomainModel):
    """Account on this pod."""

    id: LocalUserId
    username: str = Field(min_length=1, max_length=255)
    identity_id: IdentityId
    created_at: datetime = Field(default_factory=utcnow)
