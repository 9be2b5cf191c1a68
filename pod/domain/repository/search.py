"""Search index interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from pod.domain.model.identity import Identity


class IdentitySearchIndex(ABC):
    """Substring index over profile name fields.

    May be backed by the identity store itself or a dedicated text index.
    """

    @abstractmethod
    async def search(
        self, terms: Sequence[str], phrase: str, limit: int
    ) -> List[Identity]:
        """Find identities by name.

        An identity matches when its first or last name contains any of
        ``terms``, or its "first last" full name contains ``phrase``; all
        comparisons are case-insensitive substring matches.

        Results are ordered by last name, first name, then account
        identifier.

        Args:
            terms: Lowercased whitespace-separated query terms
            phrase: The whole lowercased query
            limit: Maximum number of results

        Returns:
            Matching identities (may be empty)
        """
        pass
