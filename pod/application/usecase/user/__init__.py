"""Local user use cases."""

from .provision_local_user import (
    ProvisionLocalUserRequest,
    ProvisionLocalUserResponse,
    ProvisionLocalUserUseCase,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "ProvisionLocalUserRequest",
    "ProvisionLocalUserResponse",
    "ProvisionLocalUserUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
