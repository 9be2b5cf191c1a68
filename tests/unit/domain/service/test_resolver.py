"""Unit tests for IdentityResolver."""

import asyncio

import pytest

from pod.domain.error import (
    InvalidIdentifierError,
    ProfileFetchError,
    ProfileValidationError,
    ResolutionError,
    ResolutionFailure,
)
from pod.domain.service import IdentityResolver
from tests.factories import make_identity, make_remote_profile


@pytest.fixture
def resolver(identity_repository, profile_fetcher, pod_settings, federation_settings):
    return IdentityResolver(
        identity_repository=identity_repository,
        profile_fetcher=profile_fetcher,
        pod_settings=pod_settings,
        federation_settings=federation_settings,
    )


class TestResolveFromStore:
    """Stored identities are returned without touching the network."""

    @pytest.mark.asyncio
    async def test_resolves_local_identity(self, resolver, identity_repository, profile_fetcher):
        alice = await identity_repository.create(
            make_identity("alice@example.org", is_local=True)
        )

        result = await resolver.resolve("alice@example.org")

        assert result == alice
        assert profile_fetcher.calls == []

    @pytest.mark.asyncio
    async def test_padding_and_case_resolve_to_same_identity(
        self, resolver, identity_repository
    ):
        await identity_repository.create(make_identity("someuser@example.org", is_local=True))

        padded = await resolver.resolve("  SOMEUSER@Example.Org  ")
        plain = await resolver.resolve("someuser@example.org")

        assert padded == plain

    @pytest.mark.asyncio
    async def test_returns_cached_remote_identity(
        self, resolver, identity_repository, profile_fetcher
    ):
        bob = await identity_repository.create(make_identity("bob@remote.example"))

        result = await resolver.resolve("Bob@Remote.Example")

        assert result == bob
        assert not result.is_local
        assert profile_fetcher.calls == []

    @pytest.mark.asyncio
    async def test_does_not_match_longer_username(self, resolver, identity_repository):
        """tom must not resolve to tomtom."""
        await identity_repository.create(
            make_identity("tomtom@example.org", is_local=True)
        )

        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("tom@example.org")

        assert exc_info.value.reason == ResolutionFailure.NOT_FOUND

    @pytest.mark.asyncio
    async def test_rejects_malformed_identifier(self, resolver, profile_fetcher):
        with pytest.raises(InvalidIdentifierError):
            await resolver.resolve("not an identifier")

        assert profile_fetcher.calls == []


class TestResolveRemote:
    """Cache misses on remote identifiers go through the profile fetcher."""

    @pytest.mark.asyncio
    async def test_fetches_and_caches_remote_identity(
        self, resolver, identity_repository, profile_fetcher
    ):
        profile_fetcher.register("bob@remote.example", make_remote_profile("Bob", "Grimm"))

        result = await resolver.resolve("bob@remote.example")

        assert not result.is_local
        assert result.account_identifier.root == "bob@remote.example"
        assert result.profile.first_name == "Bob"
        assert result.serialized_public_key is not None
        assert await identity_repository.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_second_resolve_uses_cache(self, resolver, profile_fetcher):
        profile_fetcher.register("bob@remote.example", make_remote_profile())

        first = await resolver.resolve("bob@remote.example")
        second = await resolver.resolve("BOB@remote.example")

        assert first.id == second.id
        assert profile_fetcher.calls == ["bob@remote.example"]

    @pytest.mark.asyncio
    async def test_concurrent_first_resolution_creates_one_identity(
        self, resolver, identity_repository, profile_fetcher
    ):
        profile_fetcher.register("bob@remote.example", make_remote_profile())
        profile_fetcher.delay = 0.01

        results = await asyncio.gather(
            *(resolver.resolve("bob@remote.example") for _ in range(5))
        )

        assert len({r.id for r in results}) == 1
        assert await identity_repository.count() == 1

    @pytest.mark.asyncio
    async def test_unknown_remote_is_not_found(self, resolver, identity_repository):
        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("nobody@remote.example")

        assert exc_info.value.reason == ResolutionFailure.NOT_FOUND
        assert await identity_repository.count() == 0

    @pytest.mark.asyncio
    async def test_transport_failure(self, resolver, identity_repository, profile_fetcher):
        profile_fetcher.error = ProfileFetchError("connection refused")

        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("bob@remote.example")

        assert exc_info.value.reason == ResolutionFailure.TRANSPORT
        assert await identity_repository.count() == 0

    @pytest.mark.asyncio
    async def test_timeout_writes_nothing(self, resolver, identity_repository, profile_fetcher):
        profile_fetcher.register("slow@remote.example", make_remote_profile())
        profile_fetcher.delay = 1.0  # fetch_timeout is 0.2

        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("slow@remote.example")

        assert exc_info.value.reason == ResolutionFailure.TIMEOUT
        assert await identity_repository.count() == 0

    @pytest.mark.asyncio
    async def test_invalid_remote_profile_is_not_cached(
        self, resolver, identity_repository, profile_fetcher
    ):
        profile_fetcher.register("nameless@remote.example", make_remote_profile(first_name=None))

        with pytest.raises(ProfileValidationError):
            await resolver.resolve("nameless@remote.example")

        assert await identity_repository.count() == 0

    @pytest.mark.asyncio
    async def test_oversized_remote_name_is_a_profile_error(
        self, resolver, identity_repository, profile_fetcher
    ):
        profile_fetcher.register("bob@remote.example", make_remote_profile(first_name="B" * 300))

        with pytest.raises(ProfileValidationError) as exc_info:
            await resolver.resolve("bob@remote.example")

        assert exc_info.value.field == "first_name"
        assert await identity_repository.count() == 0

    @pytest.mark.asyncio
    async def test_local_host_is_never_fetched(self, resolver, profile_fetcher):
        profile_fetcher.register("ghost@example.org", make_remote_profile())

        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("ghost@example.org")

        assert exc_info.value.reason == ResolutionFailure.NOT_FOUND
        assert profile_fetcher.calls == []

    @pytest.mark.asyncio
    async def test_allow_remote_false_skips_fetch(self, resolver, profile_fetcher):
        profile_fetcher.register("bob@remote.example", make_remote_profile())

        with pytest.raises(ResolutionError):
            await resolver.resolve("bob@remote.example", allow_remote=False)

        assert profile_fetcher.calls == []


class TestResolveLocal:
    """Tests for resolve_local."""

    @pytest.mark.asyncio
    async def test_returns_local_identity(self, resolver, identity_repository):
        alice = await identity_repository.create(
            make_identity("alice@example.org", is_local=True)
        )

        assert await resolver.resolve_local("Alice@Example.org") == alice

    @pytest.mark.asyncio
    async def test_cached_remote_identity_is_not_found(
        self, resolver, identity_repository, profile_fetcher
    ):
        await identity_repository.create(make_identity("bob@remote.example"))

        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve_local("bob@remote.example")

        assert exc_info.value.reason == ResolutionFailure.NOT_FOUND
        assert profile_fetcher.calls == []

    @pytest.mark.asyncio
    async def test_never_fetches(self, resolver, profile_fetcher):
        profile_fetcher.register("bob@remote.example", make_remote_profile())

        with pytest.raises(ResolutionError):
            await resolver.resolve_local("bob@remote.example")

        assert profile_fetcher.calls == []


class TestRefresh:
    """Tests for refresh."""

    @pytest.mark.asyncio
    async def test_replaces_remote_profile(self, resolver, identity_repository, profile_fetcher):
        bob = await identity_repository.create(make_identity("bob@remote.example"))
        profile_fetcher.register("bob@remote.example", make_remote_profile("Robert", "Grimm"))

        refreshed = await resolver.refresh(bob)

        assert refreshed.id == bob.id
        assert refreshed.profile.first_name == "Robert"
        stored = await identity_repository.find_by_id(bob.id)
        assert stored.profile.last_name == "Grimm"

    @pytest.mark.asyncio
    async def test_local_identity_cannot_be_refreshed(self, resolver):
        with pytest.raises(ValueError):
            await resolver.refresh(make_identity("alice@example.org", is_local=True))

    @pytest.mark.asyncio
    async def test_oversized_refresh_keeps_stored_profile(
        self, resolver, identity_repository, profile_fetcher
    ):
        bob = await identity_repository.create(make_identity("bob@remote.example"))
        profile_fetcher.register(
            "bob@remote.example", make_remote_profile("Robert", "G" * 300)
        )

        with pytest.raises(ProfileValidationError) as exc_info:
            await resolver.refresh(bob)

        assert exc_info.value.field == "last_name"
        assert await identity_repository.find_by_id(bob.id) == bob
