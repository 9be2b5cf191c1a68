"""Unit tests for provider selection and the test container."""

from unittest.mock import patch

import pytest

from pod.adapter.webfinger import MockProfileFetcher
from pod.application.usecase.identity import (
    DestroyIdentityUseCase,
    ExportIdentityUseCase,
    ResolveIdentityUseCase,
    SearchPeopleUseCase,
)
from pod.config import PodSettings, Settings
from pod.domain.repository import IdentityRepository, UnitOfWork
from pod.domain.service import ProfileFetcher
from pod.persistence.repository.inmemory import InMemoryUnitOfWork
from pod.util.di import (
    FederationProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdFederationProvider,
    ProdPersistenceProvider,
    PROVIDERS,
    get_provider,
    swappable_components,
)
from pod.util.di.container import create_container
from pod.util.error import DependencyInjectionError
from tests.di import MockFederationProvider, MockPersistenceProvider, build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetProvider:
    def test_concrete_provider_is_used_directly(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_selects_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(FederationProvider) is ProdFederationProvider

    def test_selects_mock_implementation(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(FederationProvider, use_mock=True) is MockFederationProvider


class TestBuildTestContainer:
    def test_rejects_unknown_component(self):
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"bluetooth"})

    @pytest.mark.asyncio
    async def test_resolves_use_cases(self, unit_env):
        for use_case_type in (
            ResolveIdentityUseCase,
            SearchPeopleUseCase,
            ExportIdentityUseCase,
            DestroyIdentityUseCase,
        ):
            assert isinstance(await unit_env.get(use_case_type), use_case_type)

    @pytest.mark.asyncio
    async def test_wires_mocks_and_settings(self, unit_env):
        fetcher = await unit_env.get(ProfileFetcher)
        unit_of_work = await unit_env.get(UnitOfWork)
        pod_settings = await unit_env.get(PodSettings)

        assert isinstance(fetcher, MockProfileFetcher)
        assert isinstance(unit_of_work, InMemoryUnitOfWork)
        assert pod_settings.host

    @pytest.mark.asyncio
    async def test_repositories_share_one_request_store(self, unit_env):
        first = await unit_env.get(IdentityRepository)
        second = await unit_env.get(IdentityRepository)

        assert first is second


def test_swappable_components():
    assert swappable_components(PROVIDERS) == {"federation", "persistence"}


class TestCreateContainer:
    @pytest.mark.asyncio
    async def test_configures_logging_and_logfire_first(self):
        settings = Settings(debug=True)
        with (
            patch("pod.util.di.container.setup_logging") as setup_logging,
            patch("pod.util.di.container.configure_logfire") as configure_logfire,
        ):
            container = create_container(settings)

        setup_logging.assert_called_once_with(settings)
        configure_logfire.assert_called_once_with(settings)
        await container.close()
