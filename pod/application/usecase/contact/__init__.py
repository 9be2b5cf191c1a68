"""Contact use cases."""

from .add_contact import AddContactRequest, AddContactResponse, AddContactUseCase
from .remove_contact import (
    RemoveContactRequest,
    RemoveContactResponse,
    RemoveContactUseCase,
)

__all__ = [
    "AddContactRequest",
    "AddContactResponse",
    "AddContactUseCase",
    "RemoveContactRequest",
    "RemoveContactResponse",
    "RemoveContactUseCase",
]
