"""
tests/test_health.py -- Integration tests for GET /api/health.

Covers:
  - 200 response with status, version, and timestamp fields
  - No authentication required
  - Unknown routes and wrong methods return the shared error envelope
"""

from __future__ import annotations

from datetime import datetime


def test_health_returns_200(api_client):
    """Health endpoint returns 200 with status, version, and an ISO timestamp."""
    client, _ = api_client
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"]
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_health_no_auth_required(api_client):
    """Health endpoint is accessible without any authentication headers."""
    client, _ = api_client
    resp = client.get("/api/health", headers={})
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_unknown_route_uses_error_envelope(api_client):
    """Router-level 404s go through the shared error envelope, not Starlette's {"detail": ...}."""
    client, _ = api_client
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"code": "http_404", "message": "Not Found", "detail": None}}


def test_wrong_method_uses_error_envelope(api_client):
    client, _ = api_client
    resp = client.get("/api/auth/login")
    assert resp.status_code == 405
    assert resp.json()["error"]["code"] == "http_405"
    assert "POST" in resp.headers["Allow"]
