"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from pod.domain.model import Comment, Contact, Identity, LocalUser, Post, Profile
from pod.domain.value import (
    AccountIdentifier,
    CommentId,
    ContactId,
    IdentityId,
    LocalUserId,
    PostId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert a joined identities/profiles row to an Identity.

    Args:
        row: Row containing identity columns and the profile columns
            first_name, last_name, image_url, bio

    Returns:
        Identity domain model
    """
    return Identity(
        id=IdentityId(_uuid(row["id"])),
        account_identifier=AccountIdentifier(row["account_identifier"]),
        is_local=row["is_local"],
        url=row.get("url"),
        serialized_public_key=row.get("serialized_public_key"),
        profile=Profile(
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            image_url=row.get("image_url"),
            bio=row.get("bio"),
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert an Identity to an identities table dict (profile excluded).

    Args:
        identity: Identity domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = identity.model_dump(exclude={"profile"})
    data["account_identifier"] = identity.account_identifier.root
    return data


def profile_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert an Identity's profile to a profiles table dict.

    Args:
        identity: Identity owning the profile

    Returns:
        Dict suitable for database insertion/update
    """
    return {"identity_id": identity.id, **identity.profile.model_dump()}


def row_to_local_user(row: Dict[str, Any]) -> LocalUser:
    """Convert database row to LocalUser domain model."""
    return LocalUser(
        id=LocalUserId(_uuid(row["id"])),
        username=row["username"],
        identity_id=IdentityId(_uuid(row["identity_id"])),
        created_at=row["created_at"],
    )


def local_user_to_dict(user: LocalUser) -> Dict[str, Any]:
    """Convert LocalUser domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=IdentityId(_uuid(row["author_id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=IdentityId(_uuid(row["author_id"])),
        author_identifier=AccountIdentifier(row["author_identifier"]),
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    model_dump() already unwraps the AccountIdentifier root model.
    """
    return comment.model_dump()


def row_to_contact(row: Dict[str, Any]) -> Contact:
    """Convert database row to Contact domain model."""
    return Contact(
        id=ContactId(_uuid(row["id"])),
        user_id=LocalUserId(_uuid(row["user_id"])),
        identity_id=IdentityId(_uuid(row["identity_id"])),
        aspect=row.get("aspect"),
        created_at=row["created_at"],
    )


def contact_to_dict(contact: Contact) -> Dict[str, Any]:
    """Convert Contact domain model to database dict."""
    return contact.model_dump()
