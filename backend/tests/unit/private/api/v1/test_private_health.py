"""Tests for private API health endpoints."""

from unittest.mock import AsyncMock, MagicMock, patch

from dwell.core.database import get_db


def test_health_check(private_client):
    """Test basic health check endpoint."""
    response = private_client.get("/api/v1/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "service" in data
    assert "version" in data
    assert "environment" in data


@patch("dwell.private.api.v1.health.ping_redis", new_callable=AsyncMock)
def test_readiness_check_all_healthy(mock_ping, private_client):
    """Test readiness check when all services are healthy."""
    mock_ping.return_value = True

    response = private_client.get("/api/v1/ready")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"]["status"] == "healthy"
    assert data["checks"]["redis"]["status"] == "healthy"


@patch("dwell.private.api.v1.health.ping_redis", new_callable=AsyncMock)
def test_readiness_check_redis_down(mock_ping, private_client):
    """Test readiness check when Redis cannot be reached."""
    mock_ping.side_effect = ConnectionError("refused")

    response = private_client.get("/api/v1/ready")
    assert response.status_code == 503

    data = response.json()["detail"]
    assert data["status"] == "not_ready"
    assert data["checks"]["database"]["status"] == "healthy"
    assert data["checks"]["redis"]["status"] == "error"


@patch("dwell.private.api.v1.health.ping_redis", new_callable=AsyncMock)
def test_readiness_check_database_down(mock_ping, private_client):
    """Test readiness check when the database query fails."""
    from dwell.private.main import app

    mock_ping.return_value = True
    mock_session = MagicMock()
    mock_session.execute.side_effect = Exception("Connection failed")
    app.dependency_overrides[get_db] = lambda: mock_session

    response = private_client.get("/api/v1/ready")
    assert response.status_code == 503

    data = response.json()["detail"]
    assert data["checks"]["database"]["status"] == "error"
    assert data["checks"]["redis"]["status"] == "healthy"


def test_root_endpoint(private_client):
    response = private_client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "Dwell Private API"
    assert "x-process-time" in response.headers


def test_startup_warns_when_dependencies_unavailable(monkeypatch):
    from fastapi.testclient import TestClient

    import dwell.private.main as private_main

    session = MagicMock()
    startup_logger = MagicMock()
    checks = {"database": {"status": "healthy"}, "redis": {"status": "error"}}
    monkeypatch.setattr(private_main, "SessionLocal", lambda: session)
    monkeypatch.setattr(private_main, "logger", startup_logger)
    monkeypatch.setattr(
        private_main, "check_dependencies", AsyncMock(return_value=("not_ready", checks))
    )

    with TestClient(private_main.app):
        pass

    session.close.assert_called_once()
    warning = startup_logger.warning.call_args.args[0]
    assert "Moderation API starting with unavailable dependencies" in warning
