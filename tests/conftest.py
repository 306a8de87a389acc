import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from services.gateway import GatewayClient, get_gateway
from services.pronunciation import get_pronunciation_http

from fake_backend import FakeBackend


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def backend():
    return FakeBackend()


def _override_gateway(transport: httpx.AsyncBaseTransport):
    async def override():
        async with httpx.AsyncClient(transport=transport, base_url="http://backend.test") as http:
            yield GatewayClient(http)
    return override


@pytest.fixture
def client(backend):
    app.dependency_overrides[get_gateway] = _override_gateway(httpx.ASGITransport(app=backend.app))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    """App whose backend always answers 502."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    app.dependency_overrides[get_gateway] = _override_gateway(httpx.MockTransport(handler))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unreachable_client():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    app.dependency_overrides[get_gateway] = _override_gateway(httpx.MockTransport(handler))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def phonetics():
    """Routes pronunciation lookups to a canned table: word -> response."""
    table: dict[str, httpx.Response] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        word = request.url.path.rsplit("/", 1)[-1]
        return table.get(word) or httpx.Response(404, json={"title": "No Definitions Found"})

    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            yield http

    app.dependency_overrides[get_pronunciation_http] = override
    yield table
    app.dependency_overrides.pop(get_pronunciation_http, None)
