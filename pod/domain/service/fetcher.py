"""Remote profile fetcher interface."""

from pod.domain.value import AccountIdentifier, RemoteProfile


class ProfileFetcher:
    """Fetches the profile of a person hosted on another pod.

    Implementations speak whatever federation protocol they like; the core
    only relies on this contract.
    """

    async def fetch_remote_profile(
        self, account_identifier: AccountIdentifier
    ) -> RemoteProfile | None:
        """Fetch a remote person's profile.

        Args:
            account_identifier: Canonical identifier of the remote person

        Returns:
            The remote profile, or None if the remote pod says the person
            does not exist

        Raises:
            ProfileFetchError: If the remote pod cannot be reached or
                answers with something unusable
        """
        raise NotImplementedError
