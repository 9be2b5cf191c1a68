"""Identity repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.error import NotFoundError, UniquenessViolation
from pod.domain.model.identity import Identity
from pod.domain.repository.identity import IdentityRepository
from pod.domain.value import AccountIdentifier, IdentityId
from pod.persistence.mappers import identity_to_dict, profile_to_dict, row_to_identity
from pod.persistence.tables import identities_table, profiles_table

UNIQUE_IDENTIFIER_INDEX = "uq_identities_account_identifier"


def select_identities() -> Select:
    """Select identities joined with their profiles."""
    return select(
        identities_table,
        profiles_table.c.first_name,
        profiles_table.c.last_name,
        profiles_table.c.image_url,
        profiles_table.c.bio,
    ).join(profiles_table, profiles_table.c.identity_id == identities_table.c.id)


def _is_identifier_collision(error: IntegrityError) -> bool:
    return UNIQUE_IDENTIFIER_INDEX in str(error.orig)


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository.

    Uniqueness is enforced by the unique index on account_identifier.
    Writes run inside a savepoint so a collision leaves the surrounding
    transaction usable and never leaves an identity without its profile.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        stmt = select_identities().where(identities_table.c.id == identity_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    async def find_by_identifier(
        self, account_identifier: AccountIdentifier
    ) -> Optional[Identity]:
        """Find an identity by canonical account identifier."""
        stmt = select_identities().where(
            identities_table.c.account_identifier == account_identifier.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    async def exists_with_identifier(
        self,
        account_identifier: AccountIdentifier,
        excluding: Optional[IdentityId] = None,
    ) -> bool:
        """Check whether a different identity holds the identifier."""
        stmt = select(identities_table.c.id).where(
            identities_table.c.account_identifier == account_identifier.root
        )
        if excluding is not None:
            stmt = stmt.where(identities_table.c.id != excluding)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, identity: Identity) -> Identity:
        """Insert identity and profile in one savepoint."""
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    identities_table.insert().values(**identity_to_dict(identity))
                )
                await self.session.execute(
                    profiles_table.insert().values(**profile_to_dict(identity))
                )
        except IntegrityError as e:
            if _is_identifier_collision(e):
                raise UniquenessViolation(identity.account_identifier.root) from e
            raise
        return identity

    async def update(self, identity: Identity) -> Identity:
        """Update identity and replace its profile in one savepoint."""
        identity_dict = identity_to_dict(identity)
        identity_dict.pop("id")
        profile_dict = profile_to_dict(identity)
        profile_dict.pop("identity_id")
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(
                    identities_table.update()
                    .where(identities_table.c.id == identity.id)
                    .values(**identity_dict)
                )
                if result.rowcount == 0:
                    raise NotFoundError("Identity", str(identity.id))
                await self.session.execute(
                    profiles_table.update()
                    .where(profiles_table.c.identity_id == identity.id)
                    .values(**profile_dict)
                )
        except IntegrityError as e:
            if _is_identifier_collision(e):
                raise UniquenessViolation(identity.account_identifier.root) from e
            raise
        return identity

    async def delete(self, identity_id: IdentityId) -> None:
        """Delete profile and identity in one savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                profiles_table.delete().where(
                    profiles_table.c.identity_id == identity_id
                )
            )
            await self.session.execute(
                identities_table.delete().where(identities_table.c.id == identity_id)
            )

    async def count(self) -> int:
        """Count identities."""
        result = await self.session.execute(
            select(func.count()).select_from(identities_table)
        )
        return result.scalar_one()
