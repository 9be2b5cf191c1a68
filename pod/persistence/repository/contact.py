"""PostgreSQL implementation of Contact repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.model import Contact
from pod.domain.repository import ContactRepository
from pod.domain.value import ContactId, IdentityId, LocalUserId
from pod.persistence.mappers import contact_to_dict, row_to_contact
from pod.persistence.tables import contacts_table


class PostgresContactRepository(ContactRepository):
    """PostgreSQL implementation of ContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self, user_id: LocalUserId, identity_id: IdentityId
    ) -> Optional[Contact]:
        """Find the contact between a user and an identity."""
        stmt = select(contacts_table).where(
            contacts_table.c.user_id == user_id,
            contacts_table.c.identity_id == identity_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_contact(dict(row)) if row else None

    async def find_by_user(self, user_id: LocalUserId) -> List[Contact]:
        """Find contacts of a user."""
        stmt = (
            select(contacts_table)
            .where(contacts_table.c.user_id == user_id)
            .order_by(contacts_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_contact(dict(row)) for row in result.mappings().all()]

    async def count_referencing(self, identity_id: IdentityId) -> int:
        """Count contacts naming an identity."""
        stmt = (
            select(func.count())
            .select_from(contacts_table)
            .where(contacts_table.c.identity_id == identity_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, contact: Contact) -> Contact:
        """Save a contact (create or update)."""
        contact_dict = contact_to_dict(contact)
        existing = await self.session.execute(
            select(contacts_table.c.id).where(contacts_table.c.id == contact.id)
        )
        if existing.first():
            stmt = (
                contacts_table.update()
                .where(contacts_table.c.id == contact.id)
                .values(**contact_dict)
            )
        else:
            stmt = contacts_table.insert().values(**contact_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return contact

    async def delete(self, contact_id: ContactId) -> None:
        """Delete one contact."""
        await self.session.execute(
            contacts_table.delete().where(contacts_table.c.id == contact_id)
        )
        await self.session.flush()

    async def delete_by_user(self, user_id: LocalUserId) -> int:
        """Delete contacts held by a user."""
        result = await self.session.execute(
            contacts_table.delete().where(contacts_table.c.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount

    async def delete_referencing(self, identity_id: IdentityId) -> int:
        """Delete contacts naming an identity."""
        result = await self.session.execute(
            contacts_table.delete().where(contacts_table.c.identity_id == identity_id)
        )
        await self.session.flush()
        return result.rowcount
