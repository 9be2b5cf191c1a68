"""Value objects exchanged with federation collaborators."""

from pod.domain.value.common import ValueObject


class RemoteProfile(ValueObject):
    """Profile data returned by a profile fetcher for a remote person.

    Generic structure independent of the wire format the remote pod speaks.
    """

    url: str | None = None  # Home pod of the remote person
    serialized_public_key: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None
    bio: str | None = None
