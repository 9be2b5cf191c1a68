"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pod.config import Settings
from pod.domain.repository import (
    CommentRepository,
    ContactRepository,
    IdentityRepository,
    IdentitySearchIndex,
    LocalUserRepository,
    PostRepository,
    UnitOfWork,
)
from pod.persistence.database import create_engine, create_session_factory
from pod.persistence.repository import (
    PostgresCommentRepository,
    PostgresContactRepository,
    PostgresIdentityRepository,
    PostgresIdentitySearchIndex,
    PostgresLocalUserRepository,
    PostgresPostRepository,
    PostgresUnitOfWork,
)
from pod.util.di.base import ProviderBase
from pod.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed when the scope closes cleanly, rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, session: AsyncSession) -> IdentityRepository:
        """Provide Identity repository."""
        return PostgresIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_local_user_repository(self, session: AsyncSession) -> LocalUserRepository:
        """Provide LocalUser repository."""
        return PostgresLocalUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, session: AsyncSession) -> ContactRepository:
        """Provide Contact repository."""
        return PostgresContactRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_search_index(self, session: AsyncSession) -> IdentitySearchIndex:
        """Provide people search index."""
        return PostgresIdentitySearchIndex(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return PostgresUnitOfWork(session)
