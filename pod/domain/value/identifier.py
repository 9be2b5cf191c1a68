"""Account identifiers.

An account identifier names a person across the federation as
``localpart@host``. Identifiers are case-insensitive; the canonical form is
trimmed and lowercased, and only the canonical form is ever stored or
compared.

Validation here is shape-only. Stricter address grammars are a policy of
the profile fetcher, which is where malformed remote addresses actually
cause harm.
"""

from pydantic import field_validator

from pod.domain.error import InvalidIdentifierError
from pod.domain.value.common import RootValueObject

SEPARATOR = "@"
MAX_LENGTH = 255


def _shape_error(value: str) -> str | None:
    """Return why a trimmed, lowercased identifier is malformed, or None."""
    if not value:
        return "empty"
    if len(value) > MAX_LENGTH:
        return f"longer than {MAX_LENGTH} characters"
    if value.count(SEPARATOR) != 1:
        return f"must contain exactly one '{SEPARATOR}'"
    localpart, host = value.split(SEPARATOR)
    if not localpart:
        return "missing local part"
    if not host:
        return "missing host"
    if any(ch.isspace() for ch in value):
        return "contains whitespace"
    if ":" in host:
        return "host must not carry a port"
    if "/" in value:
        return "contains '/'"
    if host.startswith(".") or host.endswith(".") or ".." in host:
        return "malformed host"
    return None


class AccountIdentifier(RootValueObject[str]):
    """Canonical ``localpart@host`` account identifier.

    Construct from untrusted input with normalize_identifier(); the
    constructor only accepts values that are already canonical.
    """

    @field_validator("root")
    @classmethod
    def validate_canonical(cls, v: str) -> str:
        """Reject anything that is not already in canonical form."""
        if v != v.strip().lower():
            raise ValueError("Account identifier must be trimmed and lowercase")
        reason = _shape_error(v)
        if reason:
            raise ValueError(f"Account identifier is invalid: {reason}")
        return v

    @property
    def localpart(self) -> str:
        return self.root.split(SEPARATOR)[0]

    @property
    def host(self) -> str:
        return self.root.split(SEPARATOR)[1]

    def is_hosted_on(self, host: str) -> bool:
        """Whether this identifier belongs to the given pod host."""
        return self.host == host.lower()


def normalize_identifier(raw: str) -> AccountIdentifier:
    """Canonicalize a raw account identifier.

    Trims surrounding whitespace, lowercases, and checks the
    ``localpart@host`` shape.

    Args:
        raw: Identifier as typed or received

    Returns:
        Canonical AccountIdentifier

    Raises:
        InvalidIdentifierError: If the identifier is malformed
    """
    if not isinstance(raw, str):
        raise InvalidIdentifierError(repr(raw), "not a string")
    value = raw.strip().lower()
    reason = _shape_error(value)
    if reason:
        raise InvalidIdentifierError(raw, reason)
    return AccountIdentifier(value)


def local_identifier(username: str, pod_host: str) -> AccountIdentifier:
    """Derive the account identifier of a local user.

    Args:
        username: The user's chosen name (any case)
        pod_host: This pod's configured public host

    Returns:
        Canonical identifier ``username@pod_host``

    Raises:
        InvalidIdentifierError: If the username cannot form an identifier
    """
    return normalize_identifier(f"{username.strip()}{SEPARATOR}{pod_host}")
