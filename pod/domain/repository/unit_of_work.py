"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """All-or-nothing scope spanning several repositories.

    Usage:
        async with unit_of_work.transaction():
            await posts.delete_by_author(identity_id)
            await identities.delete(identity_id)

    Any exception leaving the block undoes every write made inside it.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic scope."""
        pass
