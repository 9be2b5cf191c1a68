"""Identity use cases."""

from .destroy_identity import (
    DestroyIdentityRequest,
    DestroyIdentityResponse,
    DestroyIdentityUseCase,
)
from .export_identity import (
    ExportIdentityRequest,
    ExportIdentityUseCase,
    IdentityDocument,
)
from .resolve_identity import ResolveIdentityRequest, ResolveIdentityUseCase
from .search_people import (
    SearchPeopleRequest,
    SearchPeopleResponse,
    SearchPeopleUseCase,
)

__all__ = [
    "DestroyIdentityRequest",
    "DestroyIdentityResponse",
    "DestroyIdentityUseCase",
    "ExportIdentityRequest",
    "ExportIdentityUseCase",
    "IdentityDocument",
    "ResolveIdentityRequest",
    "ResolveIdentityUseCase",
    "SearchPeopleRequest",
    "SearchPeopleResponse",
    "SearchPeopleUseCase",
]
