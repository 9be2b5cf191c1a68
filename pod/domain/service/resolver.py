"""Identity resolution.

Turns an account identifier into an Identity. Local identities and cached
copies of remote ones are looked up the same way; only a cache miss on a
remote identifier reaches out to the network.
"""

import asyncio
from uuid import uuid4

import logfire
import pydantic

from pod.config import FederationSettings, PodSettings
from pod.domain.error import (
    ProfileFetchError,
    ProfileValidationError,
    ResolutionError,
    ResolutionFailure,
    UniquenessViolation,
)
from pod.domain.model import Identity, Profile, utcnow
from pod.domain.repository import IdentityRepository
from pod.domain.value import (
    AccountIdentifier,
    IdentityId,
    RemoteProfile,
    normalize_identifier,
)

from .base import Service
from .fetcher import ProfileFetcher


class IdentityResolver(Service):
    """Resolves account identifiers to identities.

    resolve() consults the store and, on a miss, the profile fetcher;
    resolve_local() never leaves the store and only answers with local
    identities, so privileged flows such as sign-in cannot trigger network
    traffic.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        profile_fetcher: ProfileFetcher,
        pod_settings: PodSettings,
        federation_settings: FederationSettings,
    ) -> None:
        """Initialize identity resolver.

        Args:
            identity_repository: Identity store adapter
            profile_fetcher: Remote profile fetcher
            pod_settings: This pod's public identity
            federation_settings: Remote fetch configuration
        """
        self.identity_repository = identity_repository
        self.profile_fetcher = profile_fetcher
        self.pod_host = pod_settings.host
        self.fetch_timeout = federation_settings.fetch_timeout

    async def resolve(self, raw_identifier: str, allow_remote: bool = True) -> Identity:
        """Resolve an identifier to a local or remote identity.

        Steps:
        1. Normalize the identifier
        2. Look for an exact match in the store, local or cached remote
        3. On a miss, fetch the remote profile and cache a new identity

        Identifiers on this pod's own host are never fetched remotely.

        Args:
            raw_identifier: Identifier as supplied by the caller
            allow_remote: Whether a cache miss may trigger a remote fetch

        Returns:
            The resolved identity

        Raises:
            InvalidIdentifierError: If the identifier is malformed
            ResolutionError: NOT_FOUND, TIMEOUT or TRANSPORT
            ProfileValidationError: If the fetched profile is invalid
        """
        account_identifier = normalize_identifier(raw_identifier)

        with logfire.span(
            "identity_resolver.resolve",
            account_identifier=account_identifier.root,
            allow_remote=allow_remote,
        ):
            identity = await self.identity_repository.find_by_identifier(
                account_identifier
            )
            if identity:
                logfire.info(
                    "Identity resolved from store",
                    account_identifier=account_identifier.root,
                    is_local=identity.is_local,
                )
                return identity

            if not allow_remote or account_identifier.is_hosted_on(self.pod_host):
                logfire.warn(
                    "Identity not found",
                    account_identifier=account_identifier.root,
                )
                raise ResolutionError(
                    account_identifier.root, ResolutionFailure.NOT_FOUND
                )

            return await self._fetch_and_cache(account_identifier)

    async def resolve_local(self, raw_identifier: str) -> Identity:
        """Resolve an identifier to a local identity only.

        Never fetches remotely. A cached remote identity counts as not found.

        Args:
            raw_identifier: Identifier as supplied by the caller

        Returns:
            The local identity

        Raises:
            InvalidIdentifierError: If the identifier is malformed
            ResolutionError: NOT_FOUND if there is no local match
        """
        account_identifier = normalize_identifier(raw_identifier)

        with logfire.span(
            "identity_resolver.resolve_local",
            account_identifier=account_identifier.root,
        ):
            identity = await self.identity_repository.find_by_identifier(
                account_identifier
            )
            if identity is None or not identity.is_local:
                logfire.warn(
                    "Local identity not found",
                    account_identifier=account_identifier.root,
                    cached_remote=identity is not None,
                )
                raise ResolutionError(
                    account_identifier.root, ResolutionFailure.NOT_FOUND
                )
            return identity

    async def refresh(self, identity: Identity) -> Identity:
        """Re-fetch a cached remote identity's profile and store it.

        The account identifier of a remote identity never changes; only the
        profile and federation metadata are replaced.

        Args:
            identity: A cached remote identity

        Returns:
            The refreshed identity

        Raises:
            ValueError: If the identity is local
            ResolutionError: NOT_FOUND, TIMEOUT or TRANSPORT
            ProfileValidationError: If the fetched profile is invalid
        """
        if identity.is_local:
            raise ValueError("Local identities are authoritative and not refreshed")

        with logfire.span(
            "identity_resolver.refresh",
            account_identifier=identity.account_identifier.root,
        ):
            remote = await self._fetch(identity.account_identifier)
            refreshed = identity.model_copy(
                update={
                    "profile": _profile_from(remote),
                    "url": remote.url,
                    "serialized_public_key": remote.serialized_public_key,
                    "updated_at": utcnow(),
                }
            )
            refreshed.validate_profile()
            saved = await self.identity_repository.update(refreshed)
            logfire.info(
                "Remote identity refreshed",
                account_identifier=saved.account_identifier.root,
            )
            return saved

    async def _fetch(self, account_identifier: AccountIdentifier) -> RemoteProfile:
        """Call the fetcher under the configured timeout."""
        try:
            remote = await asyncio.wait_for(
                self.profile_fetcher.fetch_remote_profile(account_identifier),
                timeout=self.fetch_timeout,
            )
        except asyncio.TimeoutError:
            logfire.warn(
                "Remote profile fetch timed out",
                account_identifier=account_identifier.root,
                timeout=self.fetch_timeout,
            )
            raise ResolutionError(
                account_identifier.root, ResolutionFailure.TIMEOUT
            ) from None
        except ProfileFetchError as e:
            logfire.warn(
                "Remote profile fetch failed",
                account_identifier=account_identifier.root,
                error=str(e),
            )
            raise ResolutionError(
                account_identifier.root, ResolutionFailure.TRANSPORT
            ) from e

        if remote is None:
            logfire.warn(
                "Remote pod does not know identity",
                account_identifier=account_identifier.root,
            )
            raise ResolutionError(account_identifier.root, ResolutionFailure.NOT_FOUND)
        return remote

    async def _fetch_and_cache(self, account_identifier: AccountIdentifier) -> Identity:
        """Fetch a remote profile and persist it as a new remote identity.

        Nothing is written before the fetch completes, so a cancelled fetch
        leaves no trace. If a concurrent resolution cached the same
        identifier first, its identity is returned instead.
        """
        remote = await self._fetch(account_identifier)

        now = utcnow()
        identity = Identity(
            id=IdentityId(uuid4()),
            account_identifier=account_identifier,
            is_local=False,
            profile=_profile_from(remote),
            url=remote.url,
            serialized_public_key=remote.serialized_public_key,
            created_at=now,
            updated_at=now,
        )
        identity.validate_profile()

        try:
            created = await self.identity_repository.create(identity)
        except UniquenessViolation:
            winner = await self.identity_repository.find_by_identifier(
                account_identifier
            )
            if winner is None:
                raise
            logfire.info(
                "Lost cache race, using existing identity",
                account_identifier=account_identifier.root,
                identity_id=str(winner.id),
            )
            return winner

        logfire.info(
            "Remote identity cached",
            account_identifier=account_identifier.root,
            identity_id=str(created.id),
        )
        return created


def _profile_from(remote: RemoteProfile) -> Profile:
    """Build a Profile from fetched data.

    Raises:
        ProfileValidationError: If a field breaks the profile's constraints
    """
    try:
        return Profile(
            first_name=remote.first_name,
            last_name=remote.last_name,
            image_url=remote.image_url,
            bio=remote.bio,
        )
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "profile"
        raise ProfileValidationError(field, error["msg"].lower()) from e
