"""Repository interfaces for the pod domain.

Interfaces live in the domain layer; implementations live in persistence.
"""

from pod.domain.repository.comment import CommentRepository
from pod.domain.repository.contact import ContactRepository
from pod.domain.repository.identity import IdentityRepository
from pod.domain.repository.local_user import LocalUserRepository
from pod.domain.repository.post import PostRepository
from pod.domain.repository.search import IdentitySearchIndex
from pod.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "IdentityRepository",
    "LocalUserRepository",
    "PostRepository",
    "CommentRepository",
    "ContactRepository",
    "IdentitySearchIndex",
    "UnitOfWork",
]
