"""Search index implementation using PostgreSQL ILIKE scans."""

from typing import List, Sequence

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.model.identity import Identity
from pod.domain.repository.search import IdentitySearchIndex
from pod.persistence.mappers import row_to_identity
from pod.persistence.repository.identity import select_identities
from pod.persistence.tables import identities_table, profiles_table

ESCAPE = "\\"


def _contains(value: str) -> str:
    """Build an ILIKE pattern matching value literally anywhere."""
    escaped = (
        value.replace(ESCAPE, ESCAPE * 2)
        .replace("%", ESCAPE + "%")
        .replace("_", ESCAPE + "_")
    )
    return f"%{escaped}%"


class PostgresIdentitySearchIndex(IdentitySearchIndex):
    """Substring search over the profiles table.

    Good enough for a single pod; a dedicated text index can replace it
    behind the same interface.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def search(
        self, terms: Sequence[str], phrase: str, limit: int
    ) -> List[Identity]:
        """Find identities whose names contain the query."""
        first = func.coalesce(profiles_table.c.first_name, "")
        last = func.coalesce(profiles_table.c.last_name, "")

        conditions = []
        for term in terms:
            pattern = _contains(term)
            conditions.append(first.ilike(pattern, escape=ESCAPE))
            conditions.append(last.ilike(pattern, escape=ESCAPE))
        if phrase:
            full_name = first.concat(" ").concat(last)
            conditions.append(full_name.ilike(_contains(phrase), escape=ESCAPE))
        if not conditions:
            return []

        stmt = (
            select_identities()
            .where(or_(*conditions))
            .order_by(
                func.lower(last),
                func.lower(first),
                identities_table.c.account_identifier,
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_identity(dict(row)) for row in result.mappings().all()]
