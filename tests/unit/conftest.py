import json
from typing import Any, List, Optional
from urllib.parse import parse_qs

import httpx
import pytest
import structlog

from core.client import FreepikClient
from core.config import ProcessConfig
from tools.server import MCPServer


class FakeUpstream:
    """Stands in for api.freepik.com; records every request it receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.payload: Any = {}
        self.status_code = 200
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_form(self) -> dict:
        return parse_qs(self.last.content.decode())


@pytest.fixture
def config() -> ProcessConfig:
    return ProcessConfig(api_key="test-key")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(config, upstream) -> FreepikClient:
    client = FreepikClient(config, transport=httpx.MockTransport(upstream))
    yield client
    client.close()


@pytest.fixture
def server(client) -> MCPServer:
    return MCPServer(client=client)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
