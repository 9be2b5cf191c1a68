"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from pod.util.di import (
    PROVIDERS,
    Component,
    get_provider,
    is_swappable,
    swappable_components,
)
from pod.util.error import DependencyInjectionError


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every swappable component is mocked unless
    listed in ``unmock``.

    Settings are loaded from environment variables.

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})

    Raises:
        DependencyInjectionError: If unknown components are requested
    """
    unmock = unmock or set()
    unknown = unmock - swappable_components(PROVIDERS)
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(
            base,
            use_mock=is_swappable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
