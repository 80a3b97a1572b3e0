"""Tests for health routes."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from cassandra_health import (
    CassandraConfig,
    CheckMode,
    ConnectionUnavailable,
    DiagnosticStatus,
    DriverConnection,
    HealthConfig,
)
from webapp.app import create_app
from webapp.config import WebAppConfig


def client_for(health_config: HealthConfig) -> TestClient:
    app = create_app(webapp_config=WebAppConfig(debug=True), health_config=health_config)
    return TestClient(app)


def test_health_up(make_connection):
    client = client_for(HealthConfig(connections={"primary": make_connection()}))

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "UP"
    assert body["components"]["cassandra"]["status"] == "UP"
    assert "topology" in body["components"]["cassandra"]["details"]


def test_health_down_returns_503(make_connection):
    connection = make_connection(
        topology=DiagnosticStatus.AVAILABLE,
        ring=DiagnosticStatus.UNAVAILABLE,
        keyspace="orders",
    )
    client = client_for(HealthConfig(connections={"primary": connection}))

    response = client.get("/health")

    assert response.status_code == 503
    details = response.json()["components"]["cassandra"]["details"]
    assert set(details) == {"topology", "ring"}


def test_unreachable_connection_is_structured_down(make_connection):
    connection = make_connection(error=ConnectionUnavailable("All hosts unreachable"))
    client = client_for(HealthConfig(connections={"primary": connection}))

    response = client.get("/health/cassandra")

    assert response.status_code == 503
    assert response.json() == {
        "status": "DOWN",
        "details": {"error": "All hosts unreachable"},
    }


def test_named_contributor(make_connection):
    client = client_for(
        HealthConfig(
            connections={
                "primary": make_connection(row=("4.0.1",)),
                "analytics": make_connection(row=("4.1.3",)),
            },
            mode=CheckMode.LIVENESS,
        )
    )

    response = client.get("/health/analytics")

    assert response.status_code == 200
    assert response.json() == {"status": "UP", "details": {"version": "4.1.3"}}


def test_unknown_contributor_404(make_connection):
    client = client_for(HealthConfig(connections={"primary": make_connection()}))

    response = client.get("/health/missing")

    assert response.status_code == 404


def test_disabled_health_reports_no_components(make_connection):
    client = client_for(
        HealthConfig(enabled=False, connections={"primary": make_connection()})
    )

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "UP", "components": {}}


def test_lifespan_keeps_registry(make_connection):
    app = create_app(health_config=HealthConfig(connections={"primary": make_connection()}))

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert app.state.health_registry.names() == ["cassandra"]


def test_unreachable_owned_connection_reports_down():
    app = create_app(cassandra_config=CassandraConfig(port=1))

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 503
    cassandra = response.json()["components"]["cassandra"]
    assert cassandra["status"] == "DOWN"
    assert "error" in cassandra["details"]


def test_failed_connect_is_served_as_down():
    error = ConnectionUnavailable("Could not connect to ['10.0.0.9']")
    app = create_app(cassandra_config=CassandraConfig(contact_points=["10.0.0.9"]))

    with patch.object(DriverConnection, "connect", side_effect=error):
        with TestClient(app) as client:
            response = client.get("/health/cassandra")

    assert response.status_code == 503
    assert response.json() == {
        "status": "DOWN",
        "details": {"error": "Could not connect to ['10.0.0.9']"},
    }


def test_owned_connection_is_checked_and_closed(make_connection):
    owned = make_connection(row=("4.0.1",))
    app = create_app(
        health_config=HealthConfig(
            connections={"analytics": make_connection()}, mode=CheckMode.LIVENESS
        ),
        cassandra_config=CassandraConfig(),
    )

    with patch.object(DriverConnection, "connect", return_value=owned):
        with TestClient(app) as client:
            response = client.get("/health/cassandra")
            assert app.state.health_registry.names() == ["cassandra", "analytics"]

    assert response.json() == {"status": "UP", "details": {"version": "4.0.1"}}
    assert owned.closed is True


def test_reserved_connection_name_rejected(make_connection):
    with pytest.raises(ValueError):
        create_app(
            health_config=HealthConfig(connections={"cassandra": make_connection()}),
            cassandra_config=CassandraConfig(),
        )


def test_disabled_health_skips_owned_connection():
    app = create_app(
        health_config=HealthConfig(enabled=False),
        cassandra_config=CassandraConfig(),
    )

    with patch.object(DriverConnection, "connect") as connect:
        with TestClient(app) as client:
            response = client.get("/health")

    connect.assert_not_called()
    assert response.json() == {"status": "UP", "components": {}}
