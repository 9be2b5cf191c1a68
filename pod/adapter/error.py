"""Infrastructure layer errors."""

from pod.domain.error import ProfileFetchError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class WebfingerError(ProviderError, ProfileFetchError):
    """A remote pod could not be reached or sent a document we cannot use."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
