"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient

from core.image import ImageConverters


@pytest.fixture(scope="function")
def client(tmp_path):
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh registry and a temporary workspace.
    """
    from main import app, init_state

    init_state(app)
    app.state.config["image"]["workspace_dir"] = str(tmp_path)
    app.state.config["image"]["allow_upscale"] = False

    # Create test client (no context manager so lifespan does not reset state)
    yield TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def uploaded(client, scenario_image):
    """Upload the scenario image as "a" and return its name"""
    payload = ImageConverters.to_base64(scenario_image, format="PNG")
    response = client.post("/api/images/upload", json={"name": "a", "image_base64": payload})
    assert response.status_code == 200
    return "a"
