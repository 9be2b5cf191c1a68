"""Remote profile fetching over WebFinger.

Resolution is two requests:

1. ``GET https://{host}/.well-known/webfinger?resource=acct:{user}@{host}``
   returns a JRD whose ``self`` link points at the person's profile document
2. ``GET`` that link with an ActivityStreams ``Accept`` header returns the
   profile itself

404 and 410 at either step mean the remote pod does not know the person.
"""

import asyncio
import logging
import re
from typing import Any
from urllib.parse import urlsplit

import httpx
import logfire

from pod.adapter.error import WebfingerError
from pod.config import FederationSettings
from pod.domain.error import ProfileFetchError
from pod.domain.service.fetcher import ProfileFetcher
from pod.domain.value import AccountIdentifier, RemoteProfile

logger = logging.getLogger(__name__)

PROFILE_CONTENT_TYPES = ("application/activity+json", "application/ld+json", "application/json")
GONE_STATUS_CODES = (404, 410)

# Conservative RFC 5322 subset; remote pods reject anything fancier anyway
_STRICT_IDENTIFIER = re.compile(
    r"^[a-z0-9._%+\-]+@(?:[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?\.)+[a-z]{2,}$"
)


class WebfingerProfileFetcher(ProfileFetcher):
    """Fetches remote profiles with WebFinger and httpx."""

    def __init__(self, federation_settings: FederationSettings) -> None:
        """Initialize fetcher.

        Args:
            federation_settings: Timeout, user agent and identifier policy
        """
        self.timeout = federation_settings.fetch_timeout
        self.user_agent = federation_settings.user_agent
        self.strict_identifiers = federation_settings.strict_identifiers
        self.scheme = "http" if federation_settings.allow_http else "https"

    async def fetch_remote_profile(
        self, account_identifier: AccountIdentifier
    ) -> RemoteProfile | None:
        """Fetch a remote person's profile.

        Args:
            account_identifier: Canonical identifier of the remote person

        Returns:
            The remote profile, or None if the remote pod does not know it

        Raises:
            WebfingerError: On transport errors, unexpected status codes or
                unusable documents
        """
        if self.strict_identifiers and not _STRICT_IDENTIFIER.match(
            account_identifier.root
        ):
            logfire.warn(
                "Identifier rejected by strict policy",
                account_identifier=account_identifier.root,
            )
            return None

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
        ) as client:
            profile_url = await self._lookup_profile_url(client, account_identifier)
            if profile_url is None:
                return None

            document = await self._get_json(
                client, profile_url, ", ".join(PROFILE_CONTENT_TYPES)
            )
            if document is None:
                return None

        profile = _profile_from_document(document, profile_url)
        logfire.info(
            "Remote profile fetched",
            account_identifier=account_identifier.root,
            profile_url=profile_url,
        )
        return profile

    def webfinger_url(self, account_identifier: AccountIdentifier) -> str:
        return f"{self.scheme}://{account_identifier.host}/.well-known/webfinger"

    async def _lookup_profile_url(
        self, client: httpx.AsyncClient, account_identifier: AccountIdentifier
    ) -> str | None:
        """Find the profile document link in the WebFinger JRD."""
        jrd = await self._get_json(
            client,
            self.webfinger_url(account_identifier),
            "application/jrd+json, application/json",
            params={"resource": f"acct:{account_identifier.root}"},
        )
        if jrd is None:
            return None

        links = jrd.get("links")
        if not isinstance(links, list):
            raise WebfingerError(
                f"WebFinger document for {account_identifier} has no links"
            )

        for link in links:
            if (
                isinstance(link, dict)
                and link.get("rel") == "self"
                and link.get("type") in PROFILE_CONTENT_TYPES
                and link.get("href")
            ):
                return link["href"]

        logger.debug("WebFinger links for %s: %r", account_identifier, links)
        raise WebfingerError(
            f"WebFinger document for {account_identifier} has no profile link"
        )

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        accept: str,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """GET a JSON document, mapping gone resources to None."""
        try:
            response = await client.get(url, params=params, headers={"Accept": accept})
        except httpx.TimeoutException as e:
            # Surfaces to the resolver as a timeout, not a transport failure
            raise asyncio.TimeoutError(f"Timed out fetching {url}") from e
        except httpx.HTTPError as e:
            logfire.warn("Remote pod unreachable", url=url, error=str(e))
            raise WebfingerError(f"HTTP error fetching {url}: {e}") from e

        if response.status_code in GONE_STATUS_CODES:
            logger.debug("%s answered %s", url, response.status_code)
            return None
        if response.status_code != 200:
            logfire.warn(
                "Remote pod returned error",
                url=url,
                status_code=response.status_code,
            )
            raise WebfingerError(
                f"Unexpected status {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise WebfingerError(f"Invalid JSON from {url}") from e
        if not isinstance(data, dict):
            raise WebfingerError(f"Expected a JSON object from {url}")
        return data


def _profile_from_document(document: dict[str, Any], profile_url: str) -> RemoteProfile:
    """Map an ActivityStreams-ish person document to a RemoteProfile.

    Explicit first_name/last_name fields win; otherwise ``name`` is split on
    the first space.
    """
    first_name = _text(document.get("first_name"))
    last_name = _text(document.get("last_name"))
    if first_name is None and last_name is None:
        name = _text(document.get("name")) or _text(document.get("preferredUsername"))
        if name:
            first_name, _, rest = name.partition(" ")
            last_name = rest.strip() or None

    icon = document.get("icon")
    image_url = icon.get("url") if isinstance(icon, dict) else _text(icon)

    public_key = document.get("publicKey")
    serialized_public_key = (
        public_key.get("publicKeyPem") if isinstance(public_key, dict) else None
    )

    url = _text(document.get("url"))
    if url is None:
        parts = urlsplit(profile_url)
        url = f"{parts.scheme}://{parts.netloc}/"

    return RemoteProfile(
        url=url,
        serialized_public_key=serialized_public_key,
        first_name=first_name,
        last_name=last_name,
        image_url=image_url,
        bio=_text(document.get("summary")),
    )


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class MockProfileFetcher(ProfileFetcher):
    """In-process fetcher for testing.

    Knows only the profiles registered on it. Every call is recorded in
    ``calls``; ``delay`` and ``error`` simulate slow and failing remotes.
    """

    def __init__(self, profiles: dict[str, RemoteProfile] | None = None) -> None:
        self.profiles: dict[str, RemoteProfile] = dict(profiles or {})
        self.calls: list[str] = []
        self.delay: float = 0.0
        self.error: ProfileFetchError | None = None

    def register(self, account_identifier: str, profile: RemoteProfile) -> None:
        self.profiles[account_identifier.lower()] = profile

    async def fetch_remote_profile(
        self, account_identifier: AccountIdentifier
    ) -> RemoteProfile | None:
        self.calls.append(account_identifier.root)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.profiles.get(account_identifier.root)
