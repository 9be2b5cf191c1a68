"""PostgreSQL repository implementations."""

from pod.persistence.repository.comment import PostgresCommentRepository
from pod.persistence.repository.contact import PostgresContactRepository
from pod.persistence.repository.identity import PostgresIdentityRepository
from pod.persistence.repository.local_user import PostgresLocalUserRepository
from pod.persistence.repository.post import PostgresPostRepository
from pod.persistence.repository.search import PostgresIdentitySearchIndex
from pod.persistence.repository.unit_of_work import PostgresUnitOfWork

__all__ = [
    "PostgresIdentityRepository",
    "PostgresLocalUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresContactRepository",
    "PostgresIdentitySearchIndex",
    "PostgresUnitOfWork",
]
