"""Strongly typed identifiers for pod entities.

NewType keeps an IdentityId from being passed where a PostId is expected.
"""

from typing import NewType
from uuid import UUID

IdentityId = NewType("IdentityId", UUID)
LocalUserId = NewType("LocalUserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ContactId = NewType("ContactId", UUID)
