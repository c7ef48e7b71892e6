"""
Runtime behavior around the inventory routes: health, store outages,
error envelopes, CORS and metrics.
"""

import pytest

from inventory_api.main import create_app


@pytest.fixture
def unreachable_store(app, monkeypatch, tmp_path):
    """Point the running app at a database file that cannot be opened."""
    monkeypatch.setenv(
        "DATABASE_URL", f"sqlite:///{tmp_path / 'missing-dir' / 'inventory.db'}"
    )


def test_health_reports_connected_store(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "healthy", "database": "connected"}


def test_health_reports_unreachable_store(client, unreachable_store):
    resp = client.get("/health")

    assert resp.status_code == 503
    assert resp.get_json()["database"] == "disconnected"


@pytest.mark.parametrize(
    "method, path, kwargs",
    [
        ("get", "/inventory", {}),
        ("get", "/inventory/abc", {}),
        ("post", "/inventory", {"json": {"name": "Widget"}}),
        ("put", "/inventory", {"json": {"inventoryId": "abc", "name": "Widget"}}),
        ("delete", "/inventory/abc", {}),
    ],
)
def test_unreachable_store_returns_500(client, unreachable_store, method, path, kwargs):
    resp = getattr(client, method)(path, **kwargs)

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert "store" in body["message"].lower()


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/does-not-exist")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unsupported_method_uses_error_envelope(client):
    resp = client.patch("/inventory", json={"name": "Widget"})

    assert resp.status_code == 405
    assert resp.get_json()["success"] is False


def test_non_json_body_is_rejected(client):
    resp = client.post("/inventory", data="name=Widget", content_type="text/plain")

    assert resp.status_code == 400


def test_cors_allows_any_origin_by_default(client):
    resp = client.get("/inventory", headers={"Origin": "http://localhost:3000"})

    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_cors_echoes_configured_origin_only(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://inventory.example.com")
    app = create_app()

    with app.test_client() as client:
        allowed = client.get(
            "/inventory", headers={"Origin": "https://inventory.example.com"}
        )
        denied = client.get("/inventory", headers={"Origin": "https://evil.example.com"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "https://inventory.example.com"
    assert "Origin" in allowed.headers.get("Vary", "")
    assert "Access-Control-Allow-Origin" not in denied.headers


def test_preflight_request_is_answered(client):
    resp = client.options(
        "/inventory",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert resp.status_code == 200
    assert "PUT" in resp.headers["Access-Control-Allow-Methods"]


def test_metrics_endpoint_exposes_app_info(client):
    client.get("/inventory")

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert b"app_info" in resp.data


def test_request_id_header_is_returned(client):
    resp = client.get("/inventory", headers={"X-Request-ID": "req-42"})

    assert resp.headers["X-Request-ID"] == "req-42"


def test_preflight_allows_request_id_header(client):
    resp = client.options(
        "/inventory/abc",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "X-Request-ID",
        },
    )

    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "x-request-id" in resp.headers["Access-Control-Allow-Headers"].lower()
