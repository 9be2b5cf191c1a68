"""Infrastructure providers."""

# Import bases
from .federation import FederationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .federation import ProdFederationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FederationProvider",
    "PersistenceProvider",
    "ProdFederationProvider",
    "ProdPersistenceProvider",
]
