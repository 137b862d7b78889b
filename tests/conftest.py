"""
Pytest global configuration for the PayCash gateway.

This conftest is designed to:
- Test the FastAPI app in isolation (no real PayDunya traffic)
- Replace the shared httpx client with one backed by httpx.MockTransport
- Record every outbound call so tests can assert on payloads and headers
"""

import json
import os

import httpx
import pytest

# Fixed test configuration, set before the app reads it
os.environ["PAYDUNYA_MASTER_KEY"] = "test-master-key"
os.environ["PAYDUNYA_PRIVATE_KEY"] = "test-private-key"
os.environ["PAYDUNYA_TOKEN"] = "test-token"
os.environ["PAYDUNYA_BASE_URL"] = "https://paydunya.test/api/v1"
os.environ["BASE_URL"] = "http://gateway.test"
os.environ["PAYDUNYA_STORE_NAME"] = "PayCash Test"

from fastapi.testclient import TestClient

from paycash.core.config import Settings, get_settings

get_settings.cache_clear()

from paycash.api.deps import get_http_client
from paycash.api.main import app

PAYDUNYA_PATH = "/api/v1"


class FakePayDunya:
    """
    Scripted stand-in for the PayDunya API.

    Register answers with `on(method, path, ...)`; unregistered routes answer 404.
    Every request received is kept in `requests`.
    """

    def __init__(self):
        self.requests = []
        self._routes = {}

    def on(self, method, path, status_code=200, json=None, text=None, exc=None):
        self._routes[(method.upper(), f"{PAYDUNYA_PATH}/{path.lstrip('/')}")] = (status_code, json, text, exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"response_code": "404", "response_text": "Not found"})
        status_code, body, text, exc = route
        if exc is not None:
            raise exc(f"simulated {exc.__name__}", request=request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached PayDunya"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


# ============================================================================
# UPSTREAM FIXTURES
# ============================================================================

@pytest.fixture
def paydunya():
    return FakePayDunya()


@pytest.fixture
def settings():
    return Settings(
        base_url="http://gateway.test",
        paydunya_base_url="https://paydunya.test/api/v1",
        paydunya_master_key="test-master-key",
        paydunya_private_key="test-private-key",
        paydunya_token="test-token",
        paydunya_store_name="PayCash Test",
        paydunya_timeout=10.0,
    )


# ============================================================================
# FASTAPI CLIENT
# ============================================================================

@pytest.fixture(scope="function")
def test_client(paydunya):
    """
    TestClient whose outbound calls go to FakePayDunya.

    The lifespan is not started (no `with` block), so the shared client is
    provided through a dependency override instead.
    """
    upstream = httpx.AsyncClient(transport=httpx.MockTransport(paydunya.handler))
    app.dependency_overrides[get_http_client] = lambda: upstream
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


# ============================================================================
# PAYLOADS
# ============================================================================

@pytest.fixture
def recharge_payload():
    return {"amount": 500, "userId": "user-42", "operator": "YAS"}


@pytest.fixture
def withdraw_payload():
    return {"amount": 1000, "phone": "22890112233", "operator": "YAS"}


@pytest.fixture
def invoice_created_response():
    """Shape of a real checkout-invoice/create answer."""
    return {
        "response_code": "00",
        "response_text": "https://paydunya.test/checkout/invoice/test_Ab12Cd34",
        "description": "Checkout Invoice Created",
        "token": "test_Ab12Cd34",
    }


@pytest.fixture
def invoice_completed_response():
    return {
        "response_code": "00",
        "response_text": "Transaction Found",
        "hash": "0c4b...",
        "invoice": {"token": "test_Ab12Cd34", "total_amount": 500, "description": "Recharge via YAS"},
        "custom_data": {"user_id": "user-42", "operator": "YAS"},
        "status": "completed",
    }
