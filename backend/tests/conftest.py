import httpx
import pytest
from fastapi.testclient import TestClient

from sandbox_relay.core.config import Settings
from sandbox_relay.dependencies import get_http_client
from sandbox_relay.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        OPENAI_API_KEY="test-key",
        OPENAI_ENDPOINT="https://llm.test/v1/chat/completions",
        STATIC_DIR=str(tmp_path),
        ALLOWED_ORIGINS="*",
    )


class FakeUpstream:
    """Records outgoing requests and answers with a canned response."""

    def __init__(self, status_code=200, json=None, text=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, text=self.text or "")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_upstream():
    return FakeUpstream


@pytest.fixture
def completion():
    def _completion(content):
        return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}

    return _completion


@pytest.fixture
def relay_client():
    def _relay_client(settings, upstream):
        app = create_app(settings)

        async def upstream_client():
            async with upstream.client() as client:
                yield client

        app.dependency_overrides[get_http_client] = upstream_client
        return TestClient(app)

    return _relay_client
