"""Tests for the GitHub REST adapter.

``respx`` patches ``httpx`` at the transport layer so no real network calls
are made.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from readme_gallery.domain.exceptions import DecodeError, NetworkError, RepositoryNotFoundError
from readme_gallery.infrastructure.github_rest_adapter import GitHubRestAdapter

from conftest import API, b64


class TestFetchRepo:
    @respx.mock
    async def test_returns_json_and_sends_v3_accept(self, http_client, ref) -> None:
        route = respx.get(f"{API}/repos/octo/demo").mock(
            return_value=httpx.Response(200, json={"default_branch": "develop"})
        )
        data = await GitHubRestAdapter(http_client).fetch_repo(ref)

        assert data == {"default_branch": "develop"}
        request = route.calls.last.request
        assert request.headers["Accept"] == "application/vnd.github.v3+json"
        assert "Authorization" not in request.headers

    @respx.mock
    async def test_token_sent_as_bearer(self, http_client, ref) -> None:
        route = respx.get(f"{API}/repos/octo/demo").mock(
            return_value=httpx.Response(200, json={})
        )
        await GitHubRestAdapter(http_client, token="t0k").fetch_repo(ref)
        assert route.calls.last.request.headers["Authorization"] == "Bearer t0k"

    @respx.mock
    async def test_custom_api_url(self, http_client, ref) -> None:
        respx.get("https://ghe.example/api/v3/repos/octo/demo").mock(
            return_value=httpx.Response(200, json={"default_branch": "trunk"})
        )
        adapter = GitHubRestAdapter(http_client, api_url="https://ghe.example/api/v3/")
        assert (await adapter.fetch_repo(ref))["default_branch"] == "trunk"

    @respx.mock
    async def test_404_raises_not_found(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo").mock(return_value=httpx.Response(404))
        with pytest.raises(RepositoryNotFoundError):
            await GitHubRestAdapter(http_client).fetch_repo(ref)

    @respx.mock
    async def test_5xx_raises_network_error(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo").mock(return_value=httpx.Response(503))
        with pytest.raises(NetworkError, match="503"):
            await GitHubRestAdapter(http_client).fetch_repo(ref)

    @respx.mock
    async def test_transport_error_raises_network_error(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo").mock(side_effect=httpx.ConnectTimeout)
        with pytest.raises(NetworkError):
            await GitHubRestAdapter(http_client).fetch_repo(ref)

    @respx.mock
    async def test_non_object_json_raises_decode_error(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo").mock(return_value=httpx.Response(200, json=[1, 2]))
        with pytest.raises(DecodeError):
            await GitHubRestAdapter(http_client).fetch_repo(ref)

    @respx.mock
    async def test_malformed_json_raises_decode_error(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo").mock(return_value=httpx.Response(200, text="{oops"))
        with pytest.raises(DecodeError):
            await GitHubRestAdapter(http_client).fetch_repo(ref)


class TestFetchReadme:
    @respx.mock
    async def test_returns_payload(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo/readme").mock(
            return_value=httpx.Response(
                200,
                json={
                    "content": b64("# Demo\n"),
                    "encoding": "base64",
                    "html_url": "https://github.com/octo/demo/blob/main/README.md",
                    "name": "README.md",
                },
            )
        )
        payload = await GitHubRestAdapter(http_client).fetch_readme(ref)

        assert payload.name == "README.md"
        assert payload.html_url.endswith("README.md")
        assert payload.content == b64("# Demo\n")

    @respx.mock
    async def test_non_string_fields_use_defaults(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo/readme").mock(
            return_value=httpx.Response(200, json={"content": b64("# hi"), "html_url": 7, "name": ["README.md"]})
        )
        payload = await GitHubRestAdapter(http_client).fetch_readme(ref)

        assert payload.html_url == ""
        assert payload.name == "README.md"
        assert payload.content == b64("# hi")

    @respx.mock
    async def test_missing_content_raises_decode_error(self, http_client, ref) -> None:
        respx.get(f"{API}/repos/octo/demo/readme").mock(
            return_value=httpx.Response(200, json={"name": "README.md"})
        )
        with pytest.raises(DecodeError):
            await GitHubRestAdapter(http_client).fetch_readme(ref)
