"""People search domain service."""

import logfire

from pod.config import SearchSettings
from pod.domain.model import Identity
from pod.domain.repository import IdentitySearchIndex

from .base import Service


class SearchService(Service):
    """Finds people by partial or full name."""

    def __init__(
        self, search_index: IdentitySearchIndex, search_settings: SearchSettings
    ) -> None:
        self.search_index = search_index
        self.limit = search_settings.limit

    async def search(self, query: str) -> list[Identity]:
        """Search people by name.

        "gri" finds both Robert Grimm and Casey Grippi; "Casey Grippi" also
        matches the full name. A blank query matches nobody.

        Args:
            query: Free-text query

        Returns:
            Matching identities in a stable order (may be empty)
        """
        terms = query.lower().split()
        phrase = " ".join(terms)
        with logfire.span("search_service.search", query=query, terms=len(terms)):
            if not terms:
                return []
            results = await self.search_index.search(terms, phrase, self.limit)
            logfire.info("People search", query=query, count=len(results))
            return results
