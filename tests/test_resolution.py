"""Tests for batch resolution."""

from io import StringIO
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest
from rich.console import Console

from license_resolver.config.loader import load_config_file
from license_resolver.exceptions import MalformedResponseError
from license_resolver.models.config import ResolverConfig
from license_resolver.models.license import License
from license_resolver.models.result import ResolutionStatus
from license_resolver.resolution import resolve_license_urls

MIT_URL = "https://github.com/mit/repo/blob/master/LICENSE"
APACHE_URL = "https://raw.githubusercontent.com/apache/repo/master/LICENSE.txt"
MISSING_URL = "https://github.com/missing/repo/blob/master/LICENSE"
LIMITED_URL = "https://github.com/limited/repo/blob/master/LICENSE"
OTHER_URL = "https://opensource.org/licenses/MIT"


def _respond(request: httpx.Request) -> httpx.Response:
    owner = request.url.path.split("/")[2]
    if owner == "mit":
        return httpx.Response(
            200, json={"license": {"spdx_id": "MIT", "name": "MIT License"}}
        )
    if owner == "apache":
        return httpx.Response(
            200,
            json={"license": {"spdx_id": "Apache-2.0", "name": "Apache License 2.0"}},
        )
    if owner == "limited":
        return httpx.Response(403)
    if owner == "broken":
        return httpx.Response(200, json={"unexpected": True})
    if owner == "offline":
        raise httpx.ConnectError("Connection refused", request=request)
    return httpx.Response(404)


@pytest.fixture
def client() -> httpx.AsyncClient:
    """HTTP client answering from _respond."""
    return httpx.AsyncClient(transport=httpx.MockTransport(_respond))


class TestResolveLicenseUrls:
    """Tests for resolve_license_urls function."""

    @pytest.mark.asyncio
    async def test_results_in_input_order(self, client: httpx.AsyncClient) -> None:
        """Test each URL gets a result in the order given."""
        urls = [APACHE_URL, OTHER_URL, MIT_URL, MISSING_URL]

        async with client:
            results = await resolve_license_urls(urls, ResolverConfig(), client=client)

        assert [r.url for r in results] == urls
        assert results[0].license == License(
            id="Apache-2.0", name="Apache License 2.0", url=APACHE_URL
        )
        assert results[1].status == ResolutionStatus.NOT_APPLICABLE
        assert results[2].license == License(id="MIT", name="MIT License", url=MIT_URL)
        assert results[3].status == ResolutionStatus.NOT_APPLICABLE

    @pytest.mark.asyncio
    async def test_rate_limit_isolated(self, client: httpx.AsyncClient) -> None:
        """Test one rate-limited URL does not fail the others."""
        async with client:
            results = await resolve_license_urls(
                [LIMITED_URL, MIT_URL], ResolverConfig(), client=client
            )

        assert results[0].status == ResolutionStatus.RATE_LIMITED
        assert results[1].status == ResolutionStatus.FOUND

    @pytest.mark.asyncio
    async def test_network_error_recorded(self, client: httpx.AsyncClient) -> None:
        """Test transport failures become NOT_APPLICABLE with a message."""
        offline_url = "https://github.com/offline/repo/blob/master/LICENSE"
        async with client:
            results = await resolve_license_urls(
                [offline_url, MIT_URL], ResolverConfig(), client=client
            )

        assert results[0].status == ResolutionStatus.NOT_APPLICABLE
        assert results[0].error is not None
        assert "Connection refused" in results[0].error
        assert results[1].found

    @pytest.mark.asyncio
    async def test_malformed_response_propagates(
        self, client: httpx.AsyncClient
    ) -> None:
        """Test parse failures surface to the caller."""
        broken_url = "https://github.com/broken/repo/blob/master/LICENSE"
        async with client:
            with pytest.raises(MalformedResponseError):
                await resolve_license_urls(
                    [broken_url], ResolverConfig(), client=client
                )

    @pytest.mark.asyncio
    async def test_with_progress(self, client: httpx.AsyncClient) -> None:
        """Test progress display path gives the same ordered results."""
        console = Console(file=StringIO(), width=120)
        urls = [MIT_URL, MISSING_URL, APACHE_URL]

        async with client:
            results = await resolve_license_urls(
                urls, ResolverConfig(), client=client, console=console
            )

        assert [r.url for r in results] == urls
        assert [r.status for r in results] == [
            ResolutionStatus.FOUND,
            ResolutionStatus.NOT_APPLICABLE,
            ResolutionStatus.FOUND,
        ]

    @pytest.mark.asyncio
    async def test_empty_input(self, client: httpx.AsyncClient) -> None:
        """Test no URLs gives no results."""
        async with client:
            assert await resolve_license_urls([], ResolverConfig(), client=client) == []

    @pytest.mark.asyncio
    async def test_credentials_sent(self) -> None:
        """Test configured credentials reach every request."""
        seen: list[str] = []

        def respond(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("Authorization", ""))
            return httpx.Response(404)

        config = ResolverConfig(github_username="u", github_token="t")
        async with httpx.AsyncClient(transport=httpx.MockTransport(respond)) as c:
            await resolve_license_urls([MIT_URL, APACHE_URL], config, client=c)

        assert seen == ["Basic dTp0", "Basic dTp0"]

    @pytest.mark.asyncio
    async def test_creates_client_with_configured_timeout(
        self, mit_payload: dict[str, Any]
    ) -> None:
        """Test a client is created when none is supplied."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json=mit_payload)
        )
        real_client = httpx.AsyncClient

        def make_client(**kwargs: Any) -> httpx.AsyncClient:
            assert kwargs["timeout"] == httpx.Timeout(7.0)
            return real_client(transport=transport, **kwargs)

        with patch(
            "license_resolver.resolution.httpx.AsyncClient", side_effect=make_client
        ):
            results = await resolve_license_urls([MIT_URL], ResolverConfig(timeout=7))

        assert results[0].found

    @pytest.mark.asyncio
    async def test_configured_base_url_without_slash(
        self, tmp_path: Path, mit_payload: dict[str, Any]
    ) -> None:
        """Test a config file base URL lacking a slash still resolves."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("api_base_url: https://ghe.example.com/api/v3\n")
        seen: list[str] = []

        def respond(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=mit_payload)

        async with httpx.AsyncClient(transport=httpx.MockTransport(respond)) as c:
            results = await resolve_license_urls(
                [MIT_URL], load_config_file(config_file), client=c
            )

        assert seen == [
            "https://ghe.example.com/api/v3/repos/mit/repo/license?ref=master"
        ]
        assert results[0].found

    @pytest.mark.asyncio
    async def test_rate_limit_notice_on_error_console(
        self, client: httpx.AsyncClient
    ) -> None:
        """Test API failure notices reach the error console in batches."""
        errors = StringIO()

        async with client:
            results = await resolve_license_urls(
                [LIMITED_URL],
                ResolverConfig(),
                client=client,
                error_console=Console(file=errors, width=200),
            )

        assert results[0].status == ResolutionStatus.RATE_LIMITED
        assert "GitHub API rate limit exceeded." in errors.getvalue()
