"""Errors raised while wiring the pod together, before any domain call runs."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting holds a value the pod cannot run with."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{setting}: {message}")


class DependencyInjectionError(UtilError):
    """The container cannot be assembled from the requested components."""
