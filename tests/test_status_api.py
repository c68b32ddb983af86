"""Tests for the status API endpoints."""

import asyncio

from fastapi.testclient import TestClient

from status_api.main import app, build_server, is_healthy


client = TestClient(app)


def test_root():
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "Daily Updates Bot"
    assert "timestamp" in body


def test_health_ok_while_loop_running():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_is_healthy_needs_running_loop():
    assert is_healthy() is False

    async def check():
        return is_healthy()

    assert asyncio.run(check()) is True


def test_build_server_config():
    server = build_server("127.0.0.1", 4555)

    assert server.config.host == "127.0.0.1"
    assert server.config.port == 4555
