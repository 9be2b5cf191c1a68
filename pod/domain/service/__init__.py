"""Domain services."""

from .base import Service
from .contact_service import ContactService
from .fetcher import ProfileFetcher
from .identity_service import IdentityService
from .lifecycle_service import DestroyOutcome, LifecycleService
from .post_service import PostService
from .resolver import IdentityResolver
from .search_service import SearchService

__all__ = [
    "ContactService",
    "DestroyOutcome",
    "IdentityResolver",
    "IdentityService",
    "LifecycleService",
    "PostService",
    "ProfileFetcher",
    "SearchService",
    "Service",
]
