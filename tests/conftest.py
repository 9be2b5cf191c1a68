"""Test configuration and fixtures."""

import logfire
import pytest

from pod.adapter.webfinger import MockProfileFetcher
from pod.config import FederationSettings, PodSettings, SearchSettings
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


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Configure logfire once, locally and without console output."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def pod_settings() -> PodSettings:
    """Pod hosted at example.org."""
    return PodSettings(url="https://example.org/")


@pytest.fixture
def federation_settings() -> FederationSettings:
    """Federation settings with a short fetch timeout."""
    return FederationSettings(fetch_timeout=0.2)


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings(limit=50)


@pytest.fixture
def store() -> InMemoryStore:
    """Shared in-memory tables for hand-wired services."""
    return InMemoryStore()


@pytest.fixture
def identity_repository(store):
    return InMemoryIdentityRepository(store)


@pytest.fixture
def local_user_repository(store):
    return InMemoryLocalUserRepository(store)


@pytest.fixture
def post_repository(store):
    return InMemoryPostRepository(store)


@pytest.fixture
def comment_repository(store):
    return InMemoryCommentRepository(store)


@pytest.fixture
def contact_repository(store):
    return InMemoryContactRepository(store)


@pytest.fixture
def search_index(store):
    return InMemoryIdentitySearchIndex(store)


@pytest.fixture
def unit_of_work(store):
    return InMemoryUnitOfWork(store)


@pytest.fixture
def profile_fetcher() -> MockProfileFetcher:
    return MockProfileFetcher()
