"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from pod.domain.model import Comment, Contact, Identity, LocalUser, Post
from pod.domain.value import (
    CommentId,
    ContactId,
    IdentityId,
    LocalUserId,
    PostId,
)


@dataclass
class InMemoryStore:
    """Tables shared by every in-memory repository of one test environment.

    Entities are immutable, so a shallow copy of each table is a complete
    snapshot.
    """

    identities: dict[IdentityId, Identity] = field(default_factory=dict)
    users: dict[LocalUserId, LocalUser] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    contacts: dict[ContactId, Contact] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        return InMemoryStore(
            identities=dict(self.identities),
            users=dict(self.users),
            posts=dict(self.posts),
            comments=dict(self.comments),
            contacts=dict(self.contacts),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        self.identities = snapshot.identities
        self.users = snapshot.users
        self.posts = snapshot.posts
        self.comments = snapshot.comments
        self.contacts = snapshot.contacts
