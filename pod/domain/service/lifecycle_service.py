"""Ownership and lifecycle of identities.

Destroying a person is an explicit procedure run inside one unit of work:

1. Comments on the identity's posts, then the posts themselves
2. For a local identity, the local user and its outgoing contacts
3. The identity and its profile, unless another local user still has it
   as a contact

A local identity is only ever destroyed together with its account. While
other users still have it as a contact, destroying it needs ``force``.

Comments the identity wrote on other people's posts belong to those posts
and are left alone.
"""

from dataclasses import dataclass

import logfire

from pod.domain.error import (
    BusinessRuleViolationError,
    CascadeError,
    NotFoundError,
)
from pod.domain.model import Identity, Post
from pod.domain.repository import (
    CommentRepository,
    ContactRepository,
    IdentityRepository,
    LocalUserRepository,
    PostRepository,
    UnitOfWork,
)
from pod.domain.value import IdentityId, LocalUserId

from .base import Service
from .contact_service import ContactService


@dataclass(frozen=True)
class DestroyOutcome:
    """What a destroy call removed."""

    identity_id: IdentityId
    posts_removed: int
    comments_removed: int
    contacts_removed: int
    local_user_removed: bool
    identity_removed: bool


class LifecycleService(Service):
    """Owns the destroy cascade and content ownership checks."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        contact_repository: ContactRepository,
        contact_service: ContactService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.identity_repository = identity_repository
        self.local_user_repository = local_user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.contact_repository = contact_repository
        self.contact_service = contact_service
        self.unit_of_work = unit_of_work

    def owns(self, identity: Identity, post: Post) -> bool:
        return identity.owns(post)

    async def sever_relationship(
        self, user_id: LocalUserId, identity_id: IdentityId
    ) -> bool:
        """Remove one contact edge. The identity itself is never deleted.

        Returns:
            True if an edge was removed
        """
        return await self.contact_service.remove_contact(user_id, identity_id)

    async def destroy(self, identity_id: IdentityId, force: bool = False) -> DestroyOutcome:
        """Destroy an identity and everything it owns.

        Args:
            identity_id: Identity to destroy
            force: Sever other users' contacts to the identity so the
                identity record can be removed too

        Returns:
            Counts of what was removed

        Raises:
            NotFoundError: If the identity does not exist
            BusinessRuleViolationError: If the identity is local, still
                referenced and force is not set; nothing has been removed
            CascadeError: If any step fails; nothing has been removed
        """
        with logfire.span(
            "lifecycle_service.destroy", identity_id=str(identity_id), force=force
        ):
            identity = await self.identity_repository.find_by_id(identity_id)
            if not identity:
                logfire.warn("Identity not found", identity_id=str(identity_id))
                raise NotFoundError("Identity", str(identity_id))

            try:
                async with self.unit_of_work.transaction():
                    outcome = await self._cascade(identity, force)
            except BusinessRuleViolationError:
                raise
            except Exception as e:
                logfire.error(
                    "Destroy failed, rolled back",
                    identity_id=str(identity_id),
                    error=str(e),
                )
                raise CascadeError(str(identity_id), e) from e

            logfire.info(
                "Identity destroyed",
                identity_id=str(identity_id),
                account_identifier=identity.account_identifier.root,
                posts_removed=outcome.posts_removed,
                comments_removed=outcome.comments_removed,
                contacts_removed=outcome.contacts_removed,
                identity_removed=outcome.identity_removed,
            )
            return outcome

    async def _cascade(self, identity: Identity, force: bool) -> DestroyOutcome:
        # Decided before anything is deleted: a local identity must never
        # outlive its account
        referencing = await self.contact_repository.count_referencing(identity.id)
        if identity.is_local and referencing and not force:
            logfire.warn(
                "Local identity still referenced",
                identity_id=str(identity.id),
                referencing_contacts=referencing,
            )
            raise BusinessRuleViolationError(
                f"{identity.account_identifier} is a contact of {referencing} "
                f"other user(s); destroy with force to sever them"
            )

        posts = await self.post_repository.find_by_author(identity.id)
        comments_removed = await self.comment_repository.delete_by_posts(
            [post.id for post in posts]
        )
        posts_removed = await self.post_repository.delete_by_author(identity.id)

        contacts_removed = 0
        local_user_removed = False
        if identity.is_local:
            user = await self.local_user_repository.find_by_identity_id(identity.id)
            if user:
                contacts_removed += await self.contact_repository.delete_by_user(
                    user.id
                )
                await self.local_user_repository.delete(user.id)
                local_user_removed = True

        if referencing and force:
            contacts_removed += await self.contact_repository.delete_referencing(
                identity.id
            )
            referencing = 0

        identity_removed = referencing == 0
        if identity_removed:
            await self.identity_repository.delete(identity.id)
        else:
            logfire.info(
                "Identity retained, still referenced",
                identity_id=str(identity.id),
                referencing_contacts=referencing,
            )

        return DestroyOutcome(
            identity_id=identity.id,
            posts_removed=posts_removed,
            comments_removed=comments_removed,
            contacts_removed=contacts_removed,
            local_user_removed=local_user_removed,
            identity_removed=identity_removed,
        )
