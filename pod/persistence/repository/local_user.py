"""LocalUser repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.model.local_user import LocalUser
from pod.domain.repository.local_user import LocalUserRepository
from pod.domain.value import IdentityId, LocalUserId
from pod.persistence.mappers import local_user_to_dict, row_to_local_user
from pod.persistence.tables import local_users_table


class PostgresLocalUserRepository(LocalUserRepository):
    """PostgreSQL implementation of LocalUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, *criteria) -> Optional[LocalUser]:
        stmt = select(local_users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_local_user(dict(row)) if row else None

    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Find a local user by ID."""
        return await self._find_one(local_users_table.c.id == user_id)

    async def find_by_username(self, username: str) -> Optional[LocalUser]:
        """Find a local user by username, ignoring case."""
        return await self._find_one(
            func.lower(local_users_table.c.username) == username.strip().lower()
        )

    async def find_by_identity_id(
        self, identity_id: IdentityId
    ) -> Optional[LocalUser]:
        """Find the local user claiming an identity."""
        return await self._find_one(local_users_table.c.identity_id == identity_id)

    async def save(self, user: LocalUser) -> LocalUser:
        """Save local user (create or update)."""
        user_dict = local_user_to_dict(user)
        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                local_users_table.update()
                .where(local_users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = local_users_table.insert().values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: LocalUserId) -> None:
        """Delete local user."""
        await self.session.execute(
            local_users_table.delete().where(local_users_table.c.id == user_id)
        )
        await self.session.flush()
