import json

import pytest

from aem_headless.core.config import HeadlessConfig


class FakeResponse:
    def __init__(self, status: int = 200, payload=None, error: Exception | None = None):
        self.status = status
        self.payload = payload
        self.error = error

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self):
        if self.error is not None:
            raise self.error
        return self.payload


class FakeTransport:
    """Records calls; replies with ``response``, raises ``error``, or echoes the body."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, request_options):
        self.calls.append((url, request_options))
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        body = request_options.get("body")
        try:
            data = json.loads(body) if body else None
        except ValueError:
            data = body
        return FakeResponse(200, {"data": data})


@pytest.fixture
def config():
    return HeadlessConfig(host_uri="http://localhost", endpoint="endpoint/path.gql", auth=("user", "pass"))


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_transport():
    return FakeTransport
