"""Export identity use case.

Produces the document other pods receive when they ask about one of our
people (or when we re-publish a cached remote person). The document is
built from a fresh read so it reflects the current state of the store.
"""

import json
import re
from uuid import UUID

from lxml import etree
from pydantic import BaseModel

from pod.application.usecase.base import BaseUseCase
from pod.domain.model import Identity
from pod.domain.service import IdentityService
from pod.domain.value import IdentityId

# Code points XML 1.0 cannot carry at all, not even as character references
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _xml_text(value: str | None) -> str | None:
    return _XML_ILLEGAL.sub("", value) if value is not None else None


class ExportIdentityRequest(BaseModel):
    """Export identity request."""

    identity_id: str


class ExportedProfile(BaseModel):
    """Profile section of an identity document."""

    first_name: str | None
    last_name: str | None
    image_url: str | None
    bio: str | None


class IdentityDocument(BaseModel):
    """Serializable snapshot of a person."""

    account_identifier: str
    url: str | None
    serialized_public_key: str | None
    profile: ExportedProfile

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityDocument":
        return cls(
            account_identifier=identity.account_identifier.root,
            url=identity.url,
            serialized_public_key=identity.serialized_public_key,
            profile=ExportedProfile(**identity.profile.model_dump()),
        )

    def to_json(self) -> str:
        return json.dumps({"person": self.model_dump()}, sort_keys=True)

    def to_xml(self) -> str:
        """Render as ``<person>`` with a nested ``<profile>``.

        Missing values become empty elements so the shape is constant.
        Characters XML cannot represent are dropped from remote-supplied text.
        """
        person = etree.Element("person")
        for field in ("account_identifier", "url", "serialized_public_key"):
            etree.SubElement(person, field).text = _xml_text(getattr(self, field))

        profile = etree.SubElement(person, "profile")
        for field, value in self.profile.model_dump().items():
            etree.SubElement(profile, field).text = _xml_text(value)

        return etree.tostring(person, encoding="unicode")


class ExportIdentityUseCase(BaseUseCase):
    """Use case for exporting a person."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: ExportIdentityRequest) -> IdentityDocument:
        """Execute export flow.

        Raises:
            NotFoundError: If the identity does not exist
        """
        identity = await self.identity_service.get_by_id(
            IdentityId(UUID(request.identity_id))
        )
        return IdentityDocument.from_identity(identity)
