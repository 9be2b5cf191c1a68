"""Unit tests for the in-memory identity store."""

import asyncio

import pytest

from pod.domain.error import NotFoundError, UniquenessViolation
from pod.domain.model import Profile
from pod.domain.value import normalize_identifier
from tests.factories import make_identity


class TestIdentifierUniqueness:
    """Account identifiers are unique across the store."""

    @pytest.mark.asyncio
    async def test_create_then_find_by_identifier(self, identity_repository):
        identity = make_identity("alice@example.org", is_local=True)

        await identity_repository.create(identity)

        found = await identity_repository.find_by_identifier(
            normalize_identifier("ALICE@example.org")
        )
        assert found == identity

    @pytest.mark.asyncio
    async def test_duplicate_identifier_is_rejected(self, identity_repository):
        await identity_repository.create(make_identity("alice@example.org"))

        with pytest.raises(UniquenessViolation) as exc_info:
            await identity_repository.create(make_identity("  Alice@Example.org "))

        assert exc_info.value.account_identifier == "alice@example.org"
        assert await identity_repository.count() == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates_allow_exactly_one(self, identity_repository):
        """Racing creates of one identifier: one wins, the rest collide."""
        candidates = [make_identity("racer@remote.example") for _ in range(5)]

        results = await asyncio.gather(
            *(identity_repository.create(c) for c in candidates),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, UniquenessViolation)]
        assert len(successes) == 1
        assert len(failures) == 4
        assert await identity_repository.count() == 1

    @pytest.mark.asyncio
    async def test_exists_with_identifier_respects_exclusion(self, identity_repository):
        identity = await identity_repository.create(make_identity("bob@example.org"))

        assert await identity_repository.exists_with_identifier(identity.account_identifier)
        assert not await identity_repository.exists_with_identifier(
            identity.account_identifier, excluding=identity.id
        )

    @pytest.mark.asyncio
    async def test_exact_match_only(self, identity_repository):
        """tom must not match tomtom."""
        await identity_repository.create(make_identity("tomtom@tom.joindiaspora.com"))

        found = await identity_repository.find_by_identifier(
            normalize_identifier("tom@tom.joindiaspora.com")
        )
        assert found is None


class TestUpdateAndDelete:
    """Tests for update and delete."""

    @pytest.mark.asyncio
    async def test_update_replaces_profile(self, identity_repository):
        identity = await identity_repository.create(make_identity("carol@example.org"))

        updated = identity.model_copy(update={"profile": Profile(first_name="Caroline")})
        await identity_repository.update(updated)

        found = await identity_repository.find_by_id(identity.id)
        assert found.profile.first_name == "Caroline"

    @pytest.mark.asyncio
    async def test_update_to_taken_identifier_is_rejected(self, identity_repository):
        await identity_repository.create(make_identity("dave@example.org"))
        erin = await identity_repository.create(make_identity("erin@example.org"))

        with pytest.raises(UniquenessViolation):
            await identity_repository.update(
                erin.model_copy(
                    update={"account_identifier": normalize_identifier("dave@example.org")}
                )
            )

    @pytest.mark.asyncio
    async def test_update_unknown_identity_raises(self, identity_repository):
        with pytest.raises(NotFoundError):
            await identity_repository.update(make_identity("ghost@example.org"))

    @pytest.mark.asyncio
    async def test_delete_frees_identifier(self, identity_repository):
        identity = await identity_repository.create(make_identity("frank@example.org"))

        await identity_repository.delete(identity.id)

        assert await identity_repository.find_by_id(identity.id) is None
        await identity_repository.create(make_identity("frank@example.org"))
