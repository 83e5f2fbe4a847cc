"""Tests for /health and /server-health."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import create_app


def test_health_reports_connected(client, upstream, auth_headers):
    upstream.rows["profiles"] = [{"id": "a"}, {"id": "b"}]

    response = client.get("/health", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["timestamp"].endswith("Z")


def test_health_reads_one_row_of_probe_table(client, upstream, auth_headers):
    client.get("/health", headers=auth_headers)

    (request,) = upstream.requests
    assert request.url.path == "/rest/v1/profiles"
    assert request.url.params["limit"] == "1"


def test_health_probe_table_is_configurable(settings, database, upstream, auth_headers):
    settings = settings.model_copy(update={"health_check_table": "_health_check"})

    with TestClient(create_app(settings, database=database)) as client:
        response = client.get("/health", headers=auth_headers)

    assert response.status_code == 200
    assert upstream.tables_queried() == ["_health_check"]


def test_health_reports_failure(client, upstream, auth_headers):
    upstream.failing.add("profiles")

    response = client.get("/health", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {
        "status": "unhealthy",
        "error": "Database connection failed",
    }


def test_health_reports_unreachable_database(client, upstream, auth_headers):
    upstream.down = True

    response = client.get("/health", headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["status"] == "unhealthy"


def test_server_health_ignores_database(client, upstream, auth_headers):
    upstream.down = True

    response = client.get("/server-health", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"status", "timestamp"}
    assert body["status"] == "healthy"
    assert upstream.requests == []


def test_health_failure_is_logged(client, upstream, auth_headers, logged_events):
    upstream.down = True

    client.get("/health", headers=auth_headers)

    (event,) = logged_events("health_check_failed")
    assert event["exc_info"]
