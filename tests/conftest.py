"""Shared fixtures for license-resolver tests."""
from typing import Any, Callable

import httpx
import pytest
from click.testing import CliRunner

MIT_PAYLOAD: dict[str, Any] = {
    "name": "LICENSE",
    "path": "LICENSE",
    "html_url": "https://github.com/owner/repo/blob/master/LICENSE",
    "download_url": "https://raw.githubusercontent.com/owner/repo/master/LICENSE",
    "license": {
        "key": "mit",
        "name": "MIT License",
        "spdx_id": "MIT",
        "url": "https://api.github.com/licenses/mit",
        "node_id": "MDc6TGljZW5zZTEz",
    },
}


class TransportSpy:
    """httpx transport handler that records requests and replays a response."""

    def __init__(self, response: Callable[[httpx.Request], httpx.Response]) -> None:
        self._response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mit_payload() -> dict[str, Any]:
    """GitHub license API payload for an MIT licensed repository."""
    return MIT_PAYLOAD


@pytest.fixture
def make_spy() -> Callable[..., TransportSpy]:
    """Build a TransportSpy answering every request with one status and body."""

    def factory(status_code: int = 200, json: Any = None) -> TransportSpy:
        return TransportSpy(
            lambda request: httpx.Response(status_code, json=json)
        )

    return factory
