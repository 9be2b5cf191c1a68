"""Identity domain service."""

from uuid import uuid4

import logfire

from pod.config import PodSettings
from pod.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    UniquenessViolation,
)
from pod.domain.model import Identity, LocalUser, Profile, utcnow
from pod.domain.repository import (
    IdentityRepository,
    LocalUserRepository,
    UnitOfWork,
)
from pod.domain.value import (
    IdentityId,
    LocalUserId,
    local_identifier,
    normalize_identifier,
)

from .base import Service


class IdentityService(Service):
    """Domain service for creating, reading and editing identities."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
        unit_of_work: UnitOfWork,
        pod_settings: PodSettings,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity store adapter
            local_user_repository: Local user repository
            unit_of_work: Atomic scope over both repositories
            pod_settings: This pod's public identity (source of local hosts)
        """
        self.identity_repository = identity_repository
        self.local_user_repository = local_user_repository
        self.unit_of_work = unit_of_work
        self.pod_settings = pod_settings

    async def get_by_id(self, identity_id: IdentityId) -> Identity:
        """Get identity by ID.

        Args:
            identity_id: Identity ID

        Returns:
            Identity entity

        Raises:
            NotFoundError: If identity not found
        """
        with logfire.span("identity_service.get_by_id", identity_id=str(identity_id)):
            identity = await self.identity_repository.find_by_id(identity_id)
            if not identity:
                logfire.warn("Identity not found", identity_id=str(identity_id))
                raise NotFoundError("Identity", str(identity_id))
            return identity

    async def find_by_account_identifier(self, raw_identifier: str) -> Identity | None:
        """Look up a stored identity, local or cached remote.

        Unlike IdentityResolver.resolve this never fetches remotely.

        Args:
            raw_identifier: Identifier in any case, possibly padded

        Returns:
            Identity if stored, None otherwise

        Raises:
            InvalidIdentifierError: If the identifier is malformed
        """
        account_identifier = normalize_identifier(raw_identifier)
        with logfire.span(
            "identity_service.find_by_account_identifier",
            account_identifier=account_identifier.root,
        ):
            return await self.identity_repository.find_by_identifier(
                account_identifier
            )

    async def provision_local_user(
        self, username: str, profile: Profile
    ) -> tuple[LocalUser, Identity]:
        """Create a local user together with its local identity.

        The account identifier is ``username@pod-host``, lowercased.

        Args:
            username: Chosen username, any case
            profile: Initial profile

        Returns:
            The new local user and its identity

        Raises:
            InvalidIdentifierError: If the username cannot form an identifier
            ProfileValidationError: If the profile is invalid
            UniquenessViolation: If the username is taken
        """
        account_identifier = local_identifier(username, self.pod_settings.host)

        with logfire.span(
            "identity_service.provision_local_user",
            account_identifier=account_identifier.root,
        ):
            now = utcnow()
            identity = Identity(
                id=IdentityId(uuid4()),
                account_identifier=account_identifier,
                is_local=True,
                profile=profile,
                url=self.pod_settings.url,
                created_at=now,
                updated_at=now,
            )
            identity.validate_profile()

            if await self.identity_repository.exists_with_identifier(
                account_identifier
            ):
                logfire.warn(
                    "Username already taken",
                    account_identifier=account_identifier.root,
                )
                raise UniquenessViolation(account_identifier.root)

            user = LocalUser(
                id=LocalUserId(uuid4()),
                username=username.strip(),
                identity_id=identity.id,
                created_at=now,
            )
            async with self.unit_of_work.transaction():
                await self.identity_repository.create(identity)
                await self.local_user_repository.save(user)

            logfire.info(
                "Local user provisioned",
                user_id=str(user.id),
                identity_id=str(identity.id),
                account_identifier=account_identifier.root,
            )
            return user, identity

    async def update_profile(self, identity_id: IdentityId, profile: Profile) -> Identity:
        """Replace the profile of a local identity.

        Remote profiles are owned by their home pod and only change through
        IdentityResolver.refresh.

        Args:
            identity_id: Local identity to edit
            profile: New profile

        Returns:
            Updated identity

        Raises:
            NotFoundError: If the identity does not exist
            BusinessRuleViolationError: If the identity is remote
            ProfileValidationError: If the new profile is invalid
        """
        with logfire.span(
            "identity_service.update_profile", identity_id=str(identity_id)
        ):
            identity = await self.get_by_id(identity_id)
            if not identity.is_local:
                raise BusinessRuleViolationError(
                    f"Cannot edit the profile of remote identity "
                    f"{identity.account_identifier}"
                )

            updated = identity.model_copy(
                update={"profile": profile, "updated_at": utcnow()}
            )
            updated.validate_profile()
            saved = await self.identity_repository.update(updated)
            logfire.info("Profile updated", identity_id=str(identity_id))
            return saved
