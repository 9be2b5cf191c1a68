"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are immutable; changes go through model_copy(update=...).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
