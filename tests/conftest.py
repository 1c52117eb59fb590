"""Shared fixtures: a test config and an httpx.MockTransport that records requests."""

import json

import httpx
import pytest

from agentweb.client import AgentWebClient
from agentweb.config import AgentWebConfig
from agentweb.gateway import ToolGateway

TEST_KEY = "test-key-123"
TEST_BASE_URL = "https://api.agentweb.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers with a canned response and keeps every request."""

    def __init__(self, status_code=200, body=None, text=None, exc=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"ok": True} if body is None else body
        self.text = text
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config():
    return AgentWebConfig(api_key=TEST_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def gateway(config, transport):
    return ToolGateway(config, client=AgentWebClient(config, transport=transport))
