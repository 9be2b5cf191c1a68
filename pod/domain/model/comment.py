"""Comment entity.

A comment belongs to the post it is attached to, not to its author.
Deleting a post deletes its comments; deleting an author does not.
"""

from datetime import datetime

from pydantic import Field

from pod.domain.model.common import DomainModel, utcnow
from pod.domain.value import AccountIdentifier, CommentId, IdentityId, PostId


class Comment(DomainModel):
    """Comment on a post."""

    id: CommentId
    post_id: PostId
    author_id: IdentityId
    author_identifier: AccountIdentifier  # Denormalized, survives the author
    text: str = Field(min_length=1, max_length=65535)
    created_at: datetime = Field(default_factory=utcnow)
