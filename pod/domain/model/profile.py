"""Profile entity.

A profile carries the human-facing fields of a person. It has no identity
or lifecycle of its own: it is created, replaced and destroyed together
with the Identity that owns it.
"""

from typing import Optional

from pydantic import Field

from pod.domain.model.common import DomainModel


class Profile(DomainModel):
    """Name and presentation fields of a person.

    Every field is optional at the type level, but a profile without a
    first name is not valid and makes its owning identity invalid; invalid
    identities are never persisted.
    """

    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    image_url: Optional[str] = None
    bio: Optional[str] = None

    @property
    def full_name(self) -> str:
        """First and last name joined by a single space."""
        parts = [p.strip() for p in (self.first_name, self.last_name) if p]
        return " ".join(p for p in parts if p)

    def field_errors(self) -> dict[str, str]:
        """Return validation failures keyed by field name."""
        errors: dict[str, str] = {}
        if not self.first_name or not self.first_name.strip():
            errors["first_name"] = "can't be blank"
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.field_errors()
