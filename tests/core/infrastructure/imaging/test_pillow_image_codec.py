"""Tests for the Pillow-backed image codec."""

import pytest
from PIL import Image

from image_cover.core.infrastructure.imaging.pillow_image_codec import PillowImageCodec
from image_cover.core.models.errors import ImageIOError
from image_cover.core.models.thumbnail import ThumbnailMode


class TestPillowImageCodec:
    def test_open_and_size(self, make_image) -> None:
        codec = PillowImageCodec()
        path = make_image("a.png", size=(320, 240))

        handle = codec.open(str(path))

        assert codec.size(handle) == (320, 240)

    def test_open_missing_file(self, tmp_path) -> None:
        with pytest.raises(ImageIOError) as exc:
            PillowImageCodec().open(str(tmp_path / "missing.jpg"))

        assert exc.value.error_code == "IMAGE_OPEN_FAILED"

    def test_open_non_image(self, tmp_path) -> None:
        path = tmp_path / "notes.jpg"
        path.write_bytes(b"definitely not an image")

        with pytest.raises(ImageIOError):
            PillowImageCodec().open(str(path))

    def test_crop_to_box_is_clamped_to_image(self, make_image) -> None:
        codec = PillowImageCodec()
        handle = codec.open(str(make_image("wm.png", size=(100, 50))))

        assert codec.size(codec.crop_to_box(handle, 400, 200)) == (100, 50)
        assert codec.size(codec.crop_to_box(handle, 60, 20)) == (60, 20)

    def test_paste_uses_overlay_alpha(self, make_image) -> None:
        codec = PillowImageCodec()
        base = codec.open(str(make_image("base.png", size=(40, 40), color=(255, 0, 0))))
        overlay = Image.new("RGBA", (10, 10), (0, 0, 255, 255))

        result = codec.paste(base, overlay, 0, 0)

        assert result.getpixel((5, 5))[:3] == (0, 0, 255)
        assert result.getpixel((20, 20))[:3] == (255, 0, 0)
        assert base.getpixel((5, 5))[:3] == (255, 0, 0)

    def test_inset_fits_inside_box_preserving_ratio(self, make_image) -> None:
        codec = PillowImageCodec()
        handle = codec.open(str(make_image("wide.png", size=(400, 200))))

        thumb = codec.resize_to_box(handle, 100, 100, ThumbnailMode.INSET)

        assert codec.size(thumb) == (100, 50)

    def test_inset_does_not_upscale(self, make_image) -> None:
        codec = PillowImageCodec()
        handle = codec.open(str(make_image("small.png", size=(40, 20))))

        thumb = codec.resize_to_box(handle, 100, 100, ThumbnailMode.INSET)

        assert codec.size(thumb) == (40, 20)

    def test_outbound_fills_box(self, make_image) -> None:
        codec = PillowImageCodec()
        handle = codec.open(str(make_image("wide.png", size=(400, 200))))

        thumb = codec.resize_to_box(handle, 100, 100, ThumbnailMode.OUTBOUND)

        assert codec.size(thumb) == (100, 100)

    def test_outbound_does_not_upscale(self, make_image) -> None:
        codec = PillowImageCodec()
        handle = codec.open(str(make_image("small.png", size=(80, 40))))

        thumb = codec.resize_to_box(handle, 100, 100, ThumbnailMode.OUTBOUND)

        assert codec.size(thumb) == (80, 40)

    def test_save_rgba_as_jpeg(self, tmp_path) -> None:
        codec = PillowImageCodec()
        target = tmp_path / "out.jpg"

        codec.save(Image.new("RGBA", (10, 10), (0, 255, 0, 128)), str(target))

        with Image.open(target) as saved:
            assert saved.format == "JPEG"
            assert saved.mode == "RGB"

    def test_save_to_missing_directory(self, tmp_path) -> None:
        with pytest.raises(ImageIOError) as exc:
            PillowImageCodec().save(Image.new("RGB", (5, 5)), str(tmp_path / "nope" / "a.png"))

        assert exc.value.error_code == "IMAGE_SAVE_FAILED"

    def test_save_unknown_extension(self, tmp_path) -> None:
        with pytest.raises(ImageIOError):
            PillowImageCodec().save(Image.new("RGB", (5, 5)), str(tmp_path / "a.unknownext"))
