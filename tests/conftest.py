"""Shared fixtures: a fake elections API behind httpx.MockTransport."""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from dane_elections_mcp.api_client import ElectionsAPIClient
from dane_elections_mcp.config import Settings
from dane_elections_mcp.dispatcher import ToolDispatcher
from dane_elections_mcp.tools import ToolRegistry, election_tools


class FakeElectionsAPI:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"ok": True}
        self.raw_body: Optional[bytes] = None
        self.error: Optional[Exception] = None
        # path -> Location header answered with a 301
        self.redirects: Dict[str, str] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.path in self.redirects:
            return httpx.Response(301, headers={"Location": self.redirects[request.url.path]})
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def fake_api():
    return FakeElectionsAPI()


@pytest.fixture
def api_client(settings, fake_api):
    return ElectionsAPIClient(settings, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def registry(api_client):
    registry = ToolRegistry()
    election_tools.register_tools(registry, api_client=api_client)
    return registry


@pytest.fixture
def dispatcher(registry):
    return ToolDispatcher(registry)
