"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from pod.config import Settings
from pod.util.di import PROVIDERS, get_provider
from pod.util.logging import setup_logging
from pod.util.observability import configure_logfire


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Logging and Logfire are configured here, before any provider runs, so
    the instrumentation done by the persistence and federation providers
    reports to a configured exporter. Providers load their own Settings
    from the environment.

    Usage:
        container = create_container()
        async with container() as request:
            use_case = await request.get(ResolveIdentityUseCase)
            person = await use_case.execute(ResolveIdentityRequest(...))
        await container.close()

    Args:
        settings: Settings used for logging and Logfire; loaded from the
            environment when omitted

    Returns:
        Configured DI container with production providers
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
