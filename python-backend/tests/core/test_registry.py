"""
Tests for ImageRegistry module
"""

import pytest

from core.exceptions import DuplicateNameError, ImageNotFoundError
from core.pixel_buffer import PixelBuffer
from core.registry import ImageRegistry


class TestImageRegistry:
    """Test ImageRegistry functionality"""

    @pytest.fixture
    def empty_registry(self):
        """Create a fresh registry for each test"""
        return ImageRegistry()

    def test_initialization(self, empty_registry):
        """Test registry starts empty"""
        assert len(empty_registry) == 0
        assert empty_registry.names() == []
        assert empty_registry.total_added == 0

    def test_add_and_get(self, empty_registry, scenario_image):
        """Test adding and retrieving an image"""
        empty_registry.add("photo", scenario_image, origin="load(photo.ppm)")

        assert "photo" in empty_registry
        assert empty_registry.get("photo") == scenario_image
        assert empty_registry.get_entry("photo").origin == "load(photo.ppm)"

    def test_collision_keeps_first_image(self, empty_registry, scenario_image):
        """Test adding an existing name fails and leaves the stored image alone"""
        empty_registry.add("photo", scenario_image)

        with pytest.raises(DuplicateNameError):
            empty_registry.add("photo", PixelBuffer.blank(3, 3))

        assert empty_registry.get("photo") == scenario_image
        assert len(empty_registry) == 1

    def test_get_missing(self, empty_registry):
        """Test missing names raise ImageNotFoundError"""
        with pytest.raises(ImageNotFoundError):
            empty_registry.get("nope")
        with pytest.raises(ImageNotFoundError):
            empty_registry.get_entry("nope")

    def test_require_absent(self, registry):
        """Test require_absent fails on any taken name"""
        registry.require_absent("x", "y")

        with pytest.raises(DuplicateNameError):
            registry.require_absent("x", "a")

    def test_names_in_insertion_order(self, empty_registry):
        """Test names are listed in insertion order"""
        for name in ["c", "a", "b"]:
            empty_registry.add(name, PixelBuffer.blank(1, 1))

        assert empty_registry.names() == ["c", "a", "b"]
        assert list(empty_registry) == ["c", "a", "b"]

    def test_statistics(self, empty_registry):
        """Test statistics calculation"""
        empty_registry.add("one", PixelBuffer.blank(4, 2))
        empty_registry.add("two", PixelBuffer.blank(3, 3))

        stats = empty_registry.get_statistics()

        assert stats["count"] == 2
        assert stats["total_added"] == 2
        assert stats["total_pixels"] == 17

    def test_export_to_dict(self, registry):
        """Test export lists metadata without pixel data"""
        exported = registry.export_to_dict()

        assert len(exported["images"]) == 1
        entry = exported["images"][0]
        assert entry["name"] == "a"
        assert entry["width"] == 3
        assert entry["height"] == 3
        assert "created_at" in entry
        assert exported["statistics"]["count"] == 1
