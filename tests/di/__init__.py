"""Mock providers for testing."""

from .federation import MockFederationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockFederationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
