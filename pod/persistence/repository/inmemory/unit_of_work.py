"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from pod.domain.repository.unit_of_work import UnitOfWork
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshot-and-restore implementation of UnitOfWork."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Restore the snapshot taken on entry if the block raises."""
        snapshot = self._store.snapshot()
        try:
            yield
        except BaseException:
            self._store.restore(snapshot)
            raise
