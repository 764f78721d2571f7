"""API tests for system endpoints and framework-level errors."""

import pytest

pytestmark = pytest.mark.api


class TestSystemRoutes:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_reports_version(self, client):
        body = client.get("/").json()

        assert body["status"] == "operational"
        assert "version" in body

    def test_trace_id_header_echoed(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"


class TestFrameworkErrors:
    def test_unknown_route_is_problem_details_404(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Resource Not Found"
        assert body["instance"] == "/nope"

    def test_wrong_method_is_405(self, client):
        assert client.patch("/health").status_code == 405
