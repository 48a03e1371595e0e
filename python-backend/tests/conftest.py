"""
Pytest configuration and fixtures for Raster Workbench tests
"""

import numpy as np
import pytest

from core.pixel_buffer import PixelBuffer
from core.registry import ImageRegistry
from services.edit_service import EditService
from services.image_service import ImageService

SCENARIO_ROWS = [
    [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
    [[255, 255, 0], [0, 255, 255], [255, 0, 255]],
    [[128, 128, 128], [64, 64, 64], [192, 192, 192]],
]


@pytest.fixture
def scenario_image():
    """3x3 reference image with primaries, secondaries and greys"""
    return PixelBuffer.from_rows(SCENARIO_ROWS)


@pytest.fixture
def gradient_image():
    """8x5 image with distinct values in every channel"""
    height, width = 5, 8
    y, x = np.mgrid[0:height, 0:width]
    pixels = np.stack([x * 30, y * 50, (x + y) * 17], axis=-1)
    return PixelBuffer(pixels)


@pytest.fixture
def registry(scenario_image):
    """Registry preloaded with the scenario image as "a" """
    registry = ImageRegistry()
    registry.add("a", scenario_image)
    return registry


@pytest.fixture
def edit_service(registry):
    """Create EditService instance for testing"""
    return EditService(registry=registry)


@pytest.fixture
def image_service(registry, tmp_path):
    """Create ImageService rooted in a temporary workspace"""
    return ImageService(registry=registry, workspace=tmp_path)
