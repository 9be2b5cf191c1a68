"""Domain value objects for pod people."""

from pod.domain.value.identifier import (
    AccountIdentifier,
    local_identifier,
    normalize_identifier,
)
from pod.domain.value.identifiers import (
    CommentId,
    ContactId,
    IdentityId,
    LocalUserId,
    PostId,
)
from pod.domain.value.types import RemoteProfile

__all__ = [
    # Identifiers
    "IdentityId",
    "LocalUserId",
    "PostId",
    "CommentId",
    "ContactId",
    # Account identifiers
    "AccountIdentifier",
    "normalize_identifier",
    "local_identifier",
    # Types
    "RemoteProfile",
]
