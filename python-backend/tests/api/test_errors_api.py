"""
API Integration Tests for error bodies and endpoint dispatch
"""

import inspect

import pytest
from fastapi.routing import APIRoute

from api.dependencies import get_image_service


class BrokenImageService:
    def list_images(self):
        raise RuntimeError("disk gone")


@pytest.fixture
def broken_client(client):
    """Client whose image service fails with an unexpected error"""
    from main import app

    app.dependency_overrides[get_image_service] = BrokenImageService
    yield client
    app.dependency_overrides.pop(get_image_service, None)


class TestErrorBodies:
    """Test error responses share one flat shape"""

    def test_unexpected_error_is_flat(self, broken_client):
        response = broken_client.get("/api/images")

        assert response.status_code == 500
        assert response.json() == {"error": "internal_error", "detail": "disk gone"}

    def test_core_error_is_flat(self, client):
        response = client.get("/api/images/ghost")

        assert response.status_code == 404
        assert set(response.json()) == {"error", "detail"}


class TestEndpointDispatch:
    """Test registry endpoints run on the threadpool, not the event loop"""

    REGISTRY_ROUTES = {
        "/api/edit/apply",
        "/api/images/load",
        "/api/images/save",
        "/api/images/upload",
        "/api/images",
        "/api/images/{name}",
        "/api/images/{name}/pixel",
        "/api/images/{name}/preview",
        "/api/images/{name}/histogram",
        "/api/system/status",
    }

    def test_registry_endpoints_are_sync(self):
        from main import app

        routes = {r.path: r for r in app.routes if isinstance(r, APIRoute)}

        assert self.REGISTRY_ROUTES <= set(routes)
        for path in self.REGISTRY_ROUTES:
            assert not inspect.iscoroutinefunction(routes[path].endpoint), path
