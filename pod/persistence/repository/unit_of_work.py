"""Unit of work implementation using PostgreSQL savepoints."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.repository.unit_of_work import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Runs a block inside a SAVEPOINT of the request session.

    The request session commits at the end of the request; a failing block
    is rolled back to the savepoint without poisoning the session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Open a savepoint, released on success and rolled back on error."""
        async with self.session.begin_nested():
            yield
