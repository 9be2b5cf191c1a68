"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Application entry point composing one or more domain services.

    Use cases take and return pydantic request/response models so callers
    never handle domain entities directly.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
