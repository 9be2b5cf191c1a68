"""Mock persistence providers for testing."""

from dishka import Scope, provide

from pod.domain.repository import (
    CommentRepository,
    ContactRepository,
    IdentityRepository,
    IdentitySearchIndex,
    LocalUserRepository,
    PostRepository,
    UnitOfWork,
)
from pod.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryContactRepository,
    InMemoryIdentityRepository,
    InMemoryIdentitySearchIndex,
    InMemoryLocalUserRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
)
from pod.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Every repository of one request shares a single InMemoryStore, so the
    unit of work can roll all of them back together. REQUEST scope gives
    each test a fresh store.
    """

    __is_mock__ = True

    scope = Scope.REQUEST

    @provide
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide
    def get_identity_repository(self, store: InMemoryStore) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return InMemoryIdentityRepository(store)

    @provide
    def get_local_user_repository(self, store: InMemoryStore) -> LocalUserRepository:
        """Provide in-memory local user repository."""
        return InMemoryLocalUserRepository(store)

    @provide
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide
    def get_contact_repository(self, store: InMemoryStore) -> ContactRepository:
        """Provide in-memory contact repository."""
        return InMemoryContactRepository(store)

    @provide
    def get_search_index(self, store: InMemoryStore) -> IdentitySearchIndex:
        """Provide in-memory search index."""
        return InMemoryIdentitySearchIndex(store)

    @provide
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        """Provide snapshot-based unit of work."""
        return InMemoryUnitOfWork(store)
