"""
API Integration Tests for System Endpoints
"""


class TestSystemAPI:
    """Integration tests for system endpoints"""

    def test_health(self, client):
        response = client.get("/api/system/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_status(self, client, uploaded):
        response = client.get("/api/system/status")

        assert response.status_code == 200
        data = response.json()
        assert data["registry"]["count"] == 1
        assert data["memory_usage"]["process_mb"] > 0
        assert data["uptime"] >= 0

    def test_config(self, client):
        response = client.get("/api/system/config")

        assert response.status_code == 200
        data = response.json()
        assert set(data) >= {"system", "api", "image"}
        assert data["image"]["allow_upscale"] is False

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Raster Workbench"
