"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidIdentifierError(ValidationError):
    """Raised when a raw account identifier is not shaped like user@host."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Identifier is invalid: {raw!r} ({reason})")


class ProfileValidationError(ValidationError):
    """Raised when an identity's profile fails validation.

    Carries the name of the failing profile field.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Profile {field.replace('_', ' ')} {message}")


class UniquenessViolation(DomainError):
    """Raised when an account identifier is already taken by another identity."""

    def __init__(self, account_identifier: str):
        self.account_identifier = account_identifier
        super().__init__(f"Account identifier already taken: {account_identifier}")


class ResolutionFailure(str, Enum):
    """Why an identifier could not be resolved to an identity."""

    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"


class ResolutionError(DomainError):
    """Raised when an identifier does not resolve to an identity.

    NOT_FOUND is a normal outcome. TIMEOUT and TRANSPORT may be retried by
    the caller; the resolver itself never retries.
    """

    def __init__(self, account_identifier: str, reason: ResolutionFailure):
        self.account_identifier = account_identifier
        self.reason = reason
        super().__init__(f"Could not resolve {account_identifier}: {reason.value}")


class ProfileFetchError(DomainError):
    """Raised by a profile fetcher when the remote pod cannot be reached."""

    pass


class CascadeError(DomainError):
    """Raised when destroying an identity fails part way.

    The unit of work has been rolled back when this is raised.
    """

    def __init__(self, identity_id: str, cause: Exception):
        self.identity_id = identity_id
        super().__init__(f"Destroying identity {identity_id} failed: {cause}")
