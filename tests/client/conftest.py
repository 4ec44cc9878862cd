"""
Client test fixtures.

``api`` is an ApiClient whose transport forwards every request to the
FastAPI app backed by the in-memory repositories.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from client.credentials import MemoryCredentialStore
from client.http import ApiClient

BASE_URL = "http://testserver/api"


def app_transport(test_client: TestClient) -> httpx.MockTransport:
    """Route httpx requests through a TestClient."""

    def handler(request: httpx.Request) -> httpx.Response:
        response = test_client.request(
            request.method,
            request.url.raw_path.decode("ascii"),
            content=request.content,
            headers=dict(request.headers),
        )
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=response.content,
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def api(client, store):
    with ApiClient(base_url=BASE_URL, store=store, transport=app_transport(client)) as api:
        yield api
