"""Unit tests for the WebFinger profile fetcher."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from pod.adapter.error import WebfingerError
from pod.adapter.webfinger import MockProfileFetcher, WebfingerProfileFetcher
from pod.config import FederationSettings
from pod.domain.error import ProfileFetchError
from pod.domain.value import normalize_identifier
from tests.factories import make_remote_profile

BOB = normalize_identifier("bob@remote.example")

JRD = {
    "subject": "acct:bob@remote.example",
    "links": [
        {
            "rel": "http://webfinger.net/rel/profile-page",
            "type": "text/html",
            "href": "https://remote.example/@bob",
        },
        {
            "rel": "self",
            "type": "application/activity+json",
            "href": "https://remote.example/users/bob",
        },
    ],
}

PERSON = {
    "type": "Person",
    "name": "Bob Grimm",
    "summary": "Remote person",
    "url": "https://remote.example/@bob",
    "icon": {"type": "Image", "url": "https://remote.example/bob.png"},
    "publicKey": {"publicKeyPem": "-----BEGIN PUBLIC KEY-----"},
}


def response(status_code: int, payload=None) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    if isinstance(payload, Exception):
        mock_response.json.side_effect = payload
    else:
        mock_response.json.return_value = payload
    return mock_response


@pytest.fixture
def fetcher() -> WebfingerProfileFetcher:
    return WebfingerProfileFetcher(FederationSettings(fetch_timeout=5.0))


class TestWebfingerProfileFetcher:
    """Tests for fetch_remote_profile."""

    @pytest.mark.asyncio
    async def test_follows_self_link_and_maps_profile(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(side_effect=[response(200, JRD), response(200, PERSON)])
            mock_client.return_value.__aenter__.return_value.get = get

            profile = await fetcher.fetch_remote_profile(BOB)

        assert profile.first_name == "Bob"
        assert profile.last_name == "Grimm"
        assert profile.bio == "Remote person"
        assert profile.image_url == "https://remote.example/bob.png"
        assert profile.serialized_public_key == "-----BEGIN PUBLIC KEY-----"
        assert profile.url == "https://remote.example/@bob"

        first_call, second_call = get.call_args_list
        assert first_call.args[0] == "https://remote.example/.well-known/webfinger"
        assert first_call.kwargs["params"] == {"resource": "acct:bob@remote.example"}
        assert second_call.args[0] == "https://remote.example/users/bob"

    @pytest.mark.asyncio
    async def test_sends_user_agent_and_timeout(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=[response(200, JRD), response(200, PERSON)]
            )

            await fetcher.fetch_remote_profile(BOB)

        kwargs = mock_client.call_args.kwargs
        assert kwargs["timeout"] == 5.0
        assert kwargs["headers"]["User-Agent"] == "pod-people/1.0"

    @pytest.mark.asyncio
    async def test_explicit_name_fields_win(self, fetcher):
        person = {**PERSON, "first_name": "Robert", "last_name": "G."}
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=[response(200, JRD), response(200, person)]
            )

            profile = await fetcher.fetch_remote_profile(BOB)

        assert (profile.first_name, profile.last_name) == ("Robert", "G.")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 410])
    async def test_unknown_person_returns_none(self, fetcher, status_code):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=response(status_code)
            )

            assert await fetcher.fetch_remote_profile(BOB) is None

    @pytest.mark.asyncio
    async def test_server_error_raises(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=response(503)
            )

            with pytest.raises(WebfingerError) as exc_info:
                await fetcher.fetch_remote_profile(BOB)

        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value, ProfileFetchError)

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("refused")
            )

            with pytest.raises(WebfingerError):
                await fetcher.fetch_remote_profile(BOB)

    @pytest.mark.asyncio
    async def test_http_timeout_surfaces_as_timeout(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("slow")
            )

            with pytest.raises(asyncio.TimeoutError):
                await fetcher.fetch_remote_profile(BOB)

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=response(200, ValueError("not json"))
            )

            with pytest.raises(WebfingerError):
                await fetcher.fetch_remote_profile(BOB)

    @pytest.mark.asyncio
    async def test_missing_self_link_raises(self, fetcher):
        jrd = {"subject": "acct:bob@remote.example", "links": JRD["links"][:1]}
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=response(200, jrd)
            )

            with pytest.raises(WebfingerError):
                await fetcher.fetch_remote_profile(BOB)

    @pytest.mark.asyncio
    async def test_strict_policy_rejects_implausible_identifier(self, fetcher):
        with patch("httpx.AsyncClient") as mock_client:
            result = await fetcher.fetch_remote_profile(normalize_identifier("bob@localhost"))

        assert result is None
        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_allow_http_switches_scheme(self):
        fetcher = WebfingerProfileFetcher(
            FederationSettings(allow_http=True, strict_identifiers=False)
        )

        assert (
            fetcher.webfinger_url(normalize_identifier("bob@localhost"))
            == "http://localhost/.well-known/webfinger"
        )


class TestMockProfileFetcher:
    @pytest.mark.asyncio
    async def test_returns_registered_profiles_and_records_calls(self):
        fetcher = MockProfileFetcher()
        fetcher.register("Bob@Remote.Example", make_remote_profile("Bob"))

        assert (await fetcher.fetch_remote_profile(BOB)).first_name == "Bob"
        assert await fetcher.fetch_remote_profile(normalize_identifier("x@remote.example")) is None
        assert fetcher.calls == ["bob@remote.example", "x@remote.example"]
