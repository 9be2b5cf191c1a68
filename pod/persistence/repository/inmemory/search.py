"""In-memory search index for testing."""

from typing import List, Sequence

from pod.domain.model.identity import Identity
from pod.domain.repository.search import IdentitySearchIndex
from pod.persistence.repository.inmemory.store import InMemoryStore


def _matches(identity: Identity, terms: Sequence[str], phrase: str) -> bool:
    first = (identity.profile.first_name or "").lower()
    last = (identity.profile.last_name or "").lower()
    if any(term in first or term in last for term in terms):
        return True
    return bool(phrase) and phrase in f"{first} {last}"


class InMemoryIdentitySearchIndex(IdentitySearchIndex):
    """Linear scan over the in-memory identity table."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def search(
        self, terms: Sequence[str], phrase: str, limit: int
    ) -> List[Identity]:
        """Find identities whose names contain the query."""
        hits = [
            identity
            for identity in self._store.identities.values()
            if _matches(identity, terms, phrase)
        ]
        hits.sort(
            key=lambda i: (
                (i.profile.last_name or "").lower(),
                (i.profile.first_name or "").lower(),
                i.account_identifier.root,
            )
        )
        return hits[:limit]
