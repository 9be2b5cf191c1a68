"""Post entity.

Posts are top-level content owned by the identity that wrote them.
"""

from datetime import datetime

from pydantic import Field

from pod.domain.model.common import DomainModel, utcnow
from pod.domain.value import IdentityId, PostId


class Post(DomainModel):
    """Top-level content item, owned by its author."""

    id: PostId
    author_id: IdentityId
    text: str = Field(min_length=1, max_length=65535)
    created_at: datetime = Field(default_factory=utcnow)
