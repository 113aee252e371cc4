"""Integration tests for the dependency cycle API endpoints."""

import pytest
from fastapi.testclient import TestClient

from depcycle.infrastructure.api.dependencies import (
    get_app_settings,
    reset_cycle_cache,
)
from depcycle.infrastructure.api.main import create_app
from depcycle.infrastructure.config.settings import AnalysisSettings, Settings


@pytest.fixture
def app():
    """Create FastAPI app with a fresh shared cache."""
    reset_cycle_cache()
    application = create_app()
    yield application
    application.dependency_overrides.clear()
    reset_cycle_cache()


@pytest.fixture
def client(app):
    return TestClient(app)


def override_analysis(app, **analysis) -> None:
    """Replace the analysis settings served to routes."""
    settings = Settings(analysis=AnalysisSettings(**analysis))
    app.dependency_overrides[get_app_settings] = lambda: settings


class TestProjectCyclesEndpoint:
    """Tests for POST /api/v1/cycles/projects."""

    def test_detects_project_cycle(self, client):
        response = client.post(
            "/api/v1/cycles/projects",
            json={
                "projects": [
                    {"id": "Core", "dependency_ids": ["Data"]},
                    {"id": "Data", "dependency_ids": ["Core"]},
                    {"id": "Web", "dependency_ids": ["Core"]},
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["cycle_type"] == "project"
        assert data["node_count"] == 3
        assert data["edge_count"] == 3
        assert data["total_cycles"] == 1
        assert data["longest_cycle"] == 3
        assert data["cycles"] == [
            {"nodes": ["Core", "Data", "Core"], "cycle_type": "project", "complexity": 3}
        ]
        assert {h["node"]: h["cycle_count"] for h in data["hotspots"]} == {
            "Core": 1,
            "Data": 1,
        }
        assert {b["node"]: b["impact"] for b in data["breakpoints"]} == {
            "Core": 1,
            "Data": 1,
        }

    def test_acyclic_graph(self, client):
        response = client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"id": "A", "dependency_ids": ["B"]}, {"id": "B"}]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_cycles"] == 0
        assert data["longest_cycle"] == 0
        assert data["hotspots"] == []
        assert data["breakpoints"] == []

    def test_empty_request(self, client):
        response = client.post("/api/v1/cycles/projects", json={})

        assert response.status_code == 200
        assert response.json()["node_count"] == 0

    def test_missing_project_id_returns_problem_details(self, client):
        response = client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"dependency_ids": ["A"]}]},
        )

        assert response.status_code == 422
        assert response.headers["content-type"].startswith("application/problem+json")
        data = response.json()
        assert data["status"] == 422
        assert data["title"] == "Unprocessable Entity"
        assert data["instance"] == "/api/v1/cycles/projects"

    def test_oversized_graph_rejected(self, app, client):
        override_analysis(app, max_nodes=2)

        response = client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"id": "A"}, {"id": "B"}, {"id": "C"}]},
        )

        assert response.status_code == 413
        data = response.json()
        assert data["title"] == "Graph Too Large"
        assert data["node_count"] == 3
        assert data["edge_count"] == 0
        assert "X-Correlation-ID" in response.headers


class TestClassCyclesEndpoint:
    """Tests for POST /api/v1/cycles/classes."""

    def test_detects_class_cycle_across_projects(self, client):
        response = client.post(
            "/api/v1/cycles/classes",
            json={
                "classes": [
                    {
                        "class_name": "OrderService",
                        "namespace": "Shop.Orders",
                        "project_id": "Shop.Core",
                        "dependency_refs": [
                            {"class_name": "InvoiceService", "namespace": "Shop.Billing"}
                        ],
                    },
                    {
                        "class_name": "InvoiceService",
                        "namespace": "Shop.Billing",
                        "project_id": "Shop.Billing",
                        "dependency_refs": [
                            {"class_name": "OrderService", "namespace": "Shop.Orders"},
                            {"class_name": "String", "namespace": "System"},
                        ],
                    },
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["cycle_type"] == "class"
        assert data["edge_count"] == 2
        assert data["cycles"][0]["nodes"] == [
            "Shop.Core.OrderService",
            "Shop.Billing.InvoiceService",
            "Shop.Core.OrderService",
        ]


class TestCycleCacheEndpoint:
    """Tests for /api/v1/cycles/cache."""

    def test_analysis_populates_cache(self, client):
        payload = {"projects": [{"id": "A", "dependency_ids": ["A"]}]}

        client.post("/api/v1/cycles/projects", json=payload)
        client.post("/api/v1/cycles/projects", json=payload)
        response = client.get("/api/v1/cycles/cache")

        assert response.status_code == 200
        assert response.json() == {"enabled": True, "entries": 1}

    def test_clear_cache(self, client):
        client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"id": "A", "dependency_ids": ["A"]}]},
        )

        response = client.delete("/api/v1/cycles/cache")

        assert response.status_code == 204
        assert client.get("/api/v1/cycles/cache").json()["entries"] == 0

    def test_disabled_cache_stays_empty(self, app, client):
        override_analysis(app, cache_enabled=False)

        client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"id": "A", "dependency_ids": ["A"]}]},
        )
        response = client.get("/api/v1/cycles/cache")

        assert response.json() == {"enabled": False, "entries": 0}


class TestCorrelationId:
    """Tests for X-Correlation-ID propagation."""

    def test_generated_when_absent(self, client):
        response = client.get("/api/v1/health")

        assert response.headers["X-Correlation-ID"]

    def test_upstream_id_echoed(self, client):
        response = client.post(
            "/api/v1/cycles/projects",
            json={"projects": [{"dependency_ids": []}]},
            headers={"X-Correlation-ID": "req-42"},
        )

        assert response.headers["X-Correlation-ID"] == "req-42"
        assert response.json()["correlation_id"] == "req-42"


class TestHealthEndpoint:
    """Tests for /api/v1/health."""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "depcycle-engine"
