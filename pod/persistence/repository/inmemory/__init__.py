"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .contact import InMemoryContactRepository
from .identity import InMemoryIdentityRepository
from .local_user import InMemoryLocalUserRepository
from .post import InMemoryPostRepository
from .search import InMemoryIdentitySearchIndex
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryContactRepository",
    "InMemoryIdentityRepository",
    "InMemoryIdentitySearchIndex",
    "InMemoryLocalUserRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
