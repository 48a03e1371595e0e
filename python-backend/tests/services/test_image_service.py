"""
Tests for ImageService and the file codec
"""

import base64

import pytest

from core.exceptions import (
    CodecError,
    DuplicateNameError,
    ImageNotFoundError,
    OutOfRangeError,
    PixelOutOfRangeError,
    UnsupportedFormatError,
)
from core.image import ImageConverters, format_ppm, parse_ppm
from core.pixel_buffer import PixelBuffer


class TestPPMCodec:
    """Test the plain-text P3 format"""

    def test_format_layout(self, scenario_image):
        """Test header lines followed by one value per line"""
        lines = format_ppm(scenario_image).splitlines()

        assert lines[:3] == ["P3", "3 3", "255"]
        assert lines[3:6] == ["255", "0", "0"]
        assert len(lines) == 3 + 27

    def test_parse_tolerates_whitespace(self):
        image = parse_ppm("P3\n2 1 255  10 20 30\n\n40 50 60\n")
        assert image.size == (2, 1)
        assert image.get_pixel(1, 0) == (40, 50, 60)

    def test_parse_rejects_other_magic(self):
        with pytest.raises(CodecError):
            parse_ppm("P6\n1 1\n255\n0 0 0\n")

    def test_parse_rejects_truncated_data(self):
        with pytest.raises(CodecError):
            parse_ppm("P3\n2 2\n255\n1 2 3\n")

    def test_parse_rejects_bad_tokens(self):
        with pytest.raises(CodecError):
            parse_ppm("P3\n1 1\n255\n1 two 3\n")


class TestLoadSave:
    """Test file round trips through the service"""

    def test_ppm_round_trip(self, image_service, registry, scenario_image):
        """Test P3 write then read reproduces the buffer exactly"""
        image_service.save("a", "scenario.ppm")
        image_service.load("scenario.ppm", "copy")

        assert registry.get("copy") == scenario_image
        assert registry.get_entry("copy").origin == "load(scenario.ppm)"

    def test_png_round_trip(self, image_service, registry, scenario_image):
        image_service.save("a", "scenario.png")
        image_service.load("scenario.png", "copy")
        assert registry.get("copy") == scenario_image

    def test_jpeg_save(self, image_service, registry, tmp_path):
        path = image_service.save("a", "scenario.jpg")
        assert path == tmp_path / "scenario.jpg"
        image_service.load(path, "lossy")
        assert registry.get("lossy").size == (3, 3)

    def test_save_refuses_overwrite(self, image_service):
        image_service.save("a", "once.ppm")
        with pytest.raises(CodecError):
            image_service.save("a", "once.ppm")
        image_service.save("a", "once.ppm", overwrite=True)

    def test_unsupported_extension(self, image_service):
        with pytest.raises(UnsupportedFormatError):
            image_service.save("a", "scenario.bmp")
        with pytest.raises(UnsupportedFormatError):
            image_service.load("scenario.gif", "x")

    def test_missing_directory(self, image_service):
        with pytest.raises(CodecError):
            image_service.save("a", "nowhere/scenario.ppm")

    def test_load_missing_file(self, image_service, registry):
        with pytest.raises(CodecError):
            image_service.load("missing.ppm", "x")
        assert "x" not in registry

    def test_load_duplicate_name(self, image_service):
        image_service.save("a", "scenario.ppm")
        with pytest.raises(DuplicateNameError):
            image_service.load("scenario.ppm", "a")

    def test_load_malformed_file(self, image_service, tmp_path):
        (tmp_path / "bad.ppm").write_text("P3\n2 2\n255\n1 2\n")
        with pytest.raises(CodecError):
            image_service.load("bad.ppm", "bad")

    def test_load_non_ascii_ppm(self, image_service, registry, tmp_path):
        """Test undecodable bytes in a .ppm are a codec error, not a crash"""
        (tmp_path / "binary.ppm").write_bytes(b"P3\n1 1\n255\n\xff\xfe 0 0\n")
        with pytest.raises(CodecError):
            image_service.load("binary.ppm", "binary")
        assert "binary" not in registry

    def test_save_missing_image(self, image_service):
        with pytest.raises(ImageNotFoundError):
            image_service.save("ghost", "ghost.ppm")


class TestUpload:
    """Test base64 registration"""

    def test_upload_png(self, image_service, registry, scenario_image):
        payload = ImageConverters.to_base64(scenario_image, format="PNG")
        image_service.upload("up", payload)
        assert registry.get("up") == scenario_image

    def test_upload_data_url(self, image_service, registry, scenario_image):
        payload = "data:image/png;base64," + ImageConverters.to_base64(scenario_image)
        image_service.upload("up", payload)
        assert registry.get("up") == scenario_image

    def test_upload_garbage(self, image_service, registry):
        with pytest.raises(CodecError):
            image_service.upload("up", "not base64 at all!")
        with pytest.raises(CodecError):
            image_service.upload("up", base64.b64encode(b"plain text").decode())
        assert "up" not in registry


class TestInspection:
    """Test read-only views"""

    def test_info_and_list(self, image_service):
        info = image_service.get_info("a")
        assert info == {"name": "a", "width": 3, "height": 3, "origin": "external"}
        assert image_service.list_images() == [info]

    def test_pixel(self, image_service):
        assert image_service.get_pixel("a", 2, 1) == (255, 0, 255)
        with pytest.raises(PixelOutOfRangeError):
            image_service.get_pixel("a", 3, 0)

    def test_preview_does_not_enlarge(self, image_service):
        thumbnail, encoded = image_service.get_preview("a")
        assert thumbnail.size == (3, 3)
        assert isinstance(encoded, str) and encoded

    def test_preview_shrinks(self, image_service, registry):
        """Test wide images are scaled down keeping the aspect ratio"""
        registry.add("wide", PixelBuffer.blank(40, 20))
        thumbnail, _ = image_service.get_preview("wide", width=16)
        assert thumbnail.size == (16, 8)

    def test_preview_width_range(self, image_service):
        with pytest.raises(OutOfRangeError):
            image_service.get_preview("a", width=5)

    def test_histogram(self, image_service):
        histogram = image_service.get_histogram("a")
        assert histogram.red.sum() == 9
