"""Unit tests for ExportIdentityUseCase."""

import json
from uuid import uuid4

import pytest
from lxml import etree

from pod.application.usecase.identity import (
    ExportIdentityRequest,
    ExportIdentityUseCase,
    IdentityDocument,
)
from pod.application.usecase.identity.export_identity import ExportedProfile
from pod.application.usecase.user import (
    ProvisionLocalUserRequest,
    ProvisionLocalUserUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from pod.domain.error import NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestExportIdentityUseCase:
    """Tests for identity documents."""

    @pytest.mark.asyncio
    async def test_xml_contains_person_and_profile(self, unit_env):
        provision = await unit_env.get(ProvisionLocalUserUseCase)
        use_case = await unit_env.get(ExportIdentityUseCase)
        created = await provision.execute(
            ProvisionLocalUserRequest(username="alice", first_name="Alice", last_name="Smith")
        )

        document = await use_case.execute(
            ExportIdentityRequest(identity_id=created.person.identity_id)
        )
        xml = document.to_xml()

        assert "person" in xml
        assert "first_name" in xml
        root = etree.fromstring(xml)
        assert root.tag == "person"
        assert root.findtext("account_identifier") == created.person.account_identifier
        assert root.findtext("profile/first_name") == "Alice"
        assert root.findtext("profile/last_name") == "Smith"

    @pytest.mark.asyncio
    async def test_json_rendering(self, unit_env):
        provision = await unit_env.get(ProvisionLocalUserUseCase)
        use_case = await unit_env.get(ExportIdentityUseCase)
        created = await provision.execute(
            ProvisionLocalUserRequest(username="bob", first_name="Bob")
        )

        document = await use_case.execute(
            ExportIdentityRequest(identity_id=created.person.identity_id)
        )
        data = json.loads(document.to_json())

        assert data["person"]["account_identifier"] == created.person.account_identifier
        assert data["person"]["profile"]["first_name"] == "Bob"
        assert data["person"]["profile"]["last_name"] is None

    @pytest.mark.asyncio
    async def test_export_reflects_latest_profile(self, unit_env):
        """The document is built from a fresh read, not a stale copy."""
        provision = await unit_env.get(ProvisionLocalUserUseCase)
        update = await unit_env.get(UpdateProfileUseCase)
        use_case = await unit_env.get(ExportIdentityUseCase)
        created = await provision.execute(
            ProvisionLocalUserRequest(username="carol", first_name="Carol")
        )
        request = ExportIdentityRequest(identity_id=created.person.identity_id)
        before = await use_case.execute(request)

        await update.execute(
            UpdateProfileRequest(identity_id=created.person.identity_id, first_name="Caroline")
        )
        after = await use_case.execute(request)

        assert before.profile.first_name == "Carol"
        assert after.profile.first_name == "Caroline"

    @pytest.mark.asyncio
    async def test_unknown_identity(self, unit_env):
        use_case = await unit_env.get(ExportIdentityUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ExportIdentityRequest(identity_id=str(uuid4())))


class TestIdentityDocumentXml:
    def test_control_characters_in_remote_text_are_dropped(self):
        document = IdentityDocument(
            account_identifier="bob@remote.example",
            url="https://remote.example/",
            serialized_public_key=None,
            profile=ExportedProfile(
                first_name="Bo\x00b",
                last_name="Grimm",
                image_url=None,
                bio="line\x0bbreak\ttab\x1f",
            ),
        )

        root = etree.fromstring(document.to_xml())

        assert root.findtext("profile/first_name") == "Bob"
        assert root.findtext("profile/bio") == "linebreak\ttab"
        assert root.findtext("serialized_public_key") == ""
