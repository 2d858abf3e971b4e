import json

import httpx
import pytest
from fastapi.testclient import TestClient

from agentdesk.core.application import create_application
from tests.factories.token import expired_access_body

AUTH = {"Authorization": "Bearer access-1"}


class RecordingBackend:
    def __init__(self):
        self.requests = []
        self.respond = lambda request: httpx.Response(200, json={"ok": True})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def client(backend):
    app = create_application(transport=httpx.MockTransport(backend))
    with TestClient(app) as test_client:
        yield test_client


def test_protected_route_requires_bearer_token(client, backend):
    response = client.get("/api/wallet")

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}
    assert backend.requests == []


def test_list_orders_forwards_token_and_query(client, backend):
    backend.respond = lambda request: httpx.Response(200, json={"count": 1, "results": [{"id": 7}]})

    response = client.get("/api/orders?status=pending&page=2&status=paid", headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"count": 1, "results": [{"id": 7}]}
    (forwarded,) = backend.requests
    assert forwarded.method == "GET"
    assert forwarded.url.path == "/agent/orders"
    assert forwarded.url.params.get_list("status") == ["pending", "paid"]
    assert forwarded.url.params["page"] == "2"
    assert forwarded.headers["authorization"] == "Bearer access-1"
    assert forwarded.extensions["timeout"]["read"] == 60


def test_create_order_forwards_body_verbatim(client, backend):
    backend.respond = lambda request: httpx.Response(201, json={"id": 99})
    payload = {"sender": {"name": "Ada"}, "recipients": [{"name": "Bola", "parcels": 2}]}

    response = client.post("/api/orders", headers=AUTH, json=payload)

    assert response.status_code == 201
    (forwarded,) = backend.requests
    assert forwarded.method == "POST"
    assert json.loads(forwarded.content) == payload
    assert forwarded.headers["content-type"] == "application/json"


def test_order_details_uses_light_read_timeout(client, backend):
    client.get("/api/orders/ORD-42", headers=AUTH)

    (forwarded,) = backend.requests
    assert forwarded.url.path == "/orders/ORD-42"
    assert forwarded.extensions["timeout"]["read"] == 30


@pytest.mark.parametrize(
    "method,path,backend_path",
    [
        ("GET", "/api/wallet", "/wallets"),
        ("GET", "/api/me", "/users/me"),
        ("PATCH", "/api/me", "/users/me"),
        ("DELETE", "/api/profile/image", "/users/me/profile-image"),
        ("GET", "/api/agent-offices", "/agent-offices"),
        ("POST", "/api/agent-offices", "/agent-offices"),
        ("GET", "/api/delivery-windows", "/delivery-windows"),
        ("POST", "/api/pricing/calculate", "/pricing/calculate"),
        ("POST", "/api/locations/reverse-geocode", "/locations/reverse-geocode"),
    ],
)
def test_routes_map_to_backend_paths(client, backend, method, path, backend_path):
    response = client.request(method, path, headers=AUTH)

    assert response.status_code == 200
    (forwarded,) = backend.requests
    assert forwarded.method == method
    assert forwarded.url.path == backend_path


def test_refresh_route_needs_no_session(client, backend):
    backend.respond = lambda request: httpx.Response(200, json={"access": "a2", "refresh": "r2"})

    response = client.post("/api/auth/refresh", json={"refresh": "r1"})

    assert response.json() == {"access": "a2", "refresh": "r2"}
    (forwarded,) = backend.requests
    assert forwarded.url.path == "/auth/refresh"
    assert "authorization" not in forwarded.headers
    assert json.loads(forwarded.content) == {"refresh": "r1"}


def test_backend_401_is_forwarded_for_client_side_refresh(client, backend):
    backend.respond = lambda request: httpx.Response(401, json=expired_access_body())

    response = client.get("/api/wallet", headers=AUTH)

    assert response.status_code == 401
    assert response.json() == expired_access_body()
    assert len(backend.requests) == 1


def test_backend_error_status_and_content_type_are_propagated(client, backend):
    backend.respond = lambda request: httpx.Response(
        400, text="bad office", headers={"content-type": "text/plain"}
    )

    response = client.post("/api/agent-offices", headers=AUTH, json={})

    assert response.status_code == 400
    assert response.text == "bad office"
    assert response.headers["content-type"].startswith("text/plain")


def _raise(error):
    def respond(request):
        raise error("failure", request=request)

    return respond


@pytest.mark.parametrize(
    "error,status,detail",
    [
        (httpx.ReadTimeout, 504, "ETIMEDOUT"),
        (httpx.ConnectTimeout, 504, "ETIMEDOUT"),
        (httpx.ConnectError, 503, "Unable to connect to the server"),
        (httpx.RemoteProtocolError, 502, "failure"),
    ],
)
def test_upstream_failures_are_mapped(client, backend, error, status, detail):
    backend.respond = _raise(error)

    response = client.get("/api/wallet", headers=AUTH)

    assert response.status_code == status
    assert response.json() == {"detail": detail}


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["backend"] == "http://localhost:8000"
