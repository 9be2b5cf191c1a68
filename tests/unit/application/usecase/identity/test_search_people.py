"""Unit tests for SearchPeopleUseCase."""

import pytest

from pod.application.usecase.identity import SearchPeopleRequest, SearchPeopleUseCase
from pod.application.usecase.user import (
    ProvisionLocalUserRequest,
    ProvisionLocalUserUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSearchPeopleUseCase:
    @pytest.mark.asyncio
    async def test_returns_people_in_name_order(self, unit_env):
        provision = await unit_env.get(ProvisionLocalUserUseCase)
        use_case = await unit_env.get(SearchPeopleUseCase)
        for username, first, last in [
            ("casey", "Casey", "Grippi"),
            ("robert", "Robert", "Grimm"),
            ("eugene", "Eugene", "Weinstein"),
        ]:
            await provision.execute(
                ProvisionLocalUserRequest(username=username, first_name=first, last_name=last)
            )

        response = await use_case.execute(SearchPeopleRequest(query="gri"))

        assert response.query == "gri"
        assert [p.full_name for p in response.people] == ["Robert Grimm", "Casey Grippi"]

    @pytest.mark.asyncio
    async def test_blank_query(self, unit_env):
        use_case = await unit_env.get(SearchPeopleUseCase)

        response = await use_case.execute(SearchPeopleRequest(query="  "))

        assert response.people == []
