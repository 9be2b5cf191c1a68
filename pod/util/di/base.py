"""Provider metadata and implementation selection.

A provider class with no subclasses is concrete and always used as is. A
provider class with subclasses names a swappable component; its subclasses
declare ``__is_mock__`` and the container picks one per component.
"""

from typing import ClassVar, Iterable, Literal, Type

from dishka import Provider

from pod.util.error import DependencyInjectionError

Component = Literal["federation", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_swappable(base: Type[ProviderBase]) -> bool:
    return bool(base.__subclasses__()) and base.__mock_component__ is not None


def swappable_components(providers: Iterable[Type[ProviderBase]]) -> set[str]:
    """Names of the components that have more than one implementation."""
    return {p.__mock_component__ for p in providers if is_swappable(p)}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no implementation of the requested kind
            is registered
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )
