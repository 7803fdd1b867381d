"""Thin adapter for interacting with Pillow."""

from typing import Any, Protocol

from PIL import Image, ImageOps

from image_cover.core.utils.constants import ALPHA_MODES, JPEG_EXTENSIONS, JPEG_QUALITY


class PillowAdapterProtocol(Protocol):
    """Minimal Pillow adapter protocol (codec-facing)."""

    def open(self, path: str) -> Image.Image: ...

    def crop(self, image: Image.Image, box: tuple[int, int, int, int]) -> Image.Image: ...

    def paste(self, base: Image.Image, overlay: Image.Image, position: tuple[int, int]) -> Image.Image: ...

    def thumbnail(self, image: Image.Image, size: tuple[int, int]) -> Image.Image: ...

    def fit(self, image: Image.Image, size: tuple[int, int]) -> Image.Image: ...

    def save(self, image: Image.Image, path: str, extension: str) -> None: ...


class PillowAdapter:
    """Low-level Pillow operations (mechanical, no error handling).

    This adapter:
    - Wraps PIL.Image / PIL.ImageOps
    - Never mutates its inputs
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, resample: Any = Image.Resampling.LANCZOS) -> None:
        self._resample = resample

    def open(self, path: str) -> Image.Image:
        """Decode the file fully so the file handle is released."""
        with Image.open(path) as image:
            image.load()
            return image.copy()

    def crop(self, image: Image.Image, box: tuple[int, int, int, int]) -> Image.Image:
        return image.crop(box)

    def paste(
        self,
        base: Image.Image,
        overlay: Image.Image,
        position: tuple[int, int],
    ) -> Image.Image:
        """Composite `overlay` on a copy of `base`, using overlay alpha as mask."""
        result = base.copy()
        mask = overlay if overlay.mode in ("RGBA", "LA") else None
        result.paste(overlay, position, mask)
        return result

    def thumbnail(self, image: Image.Image, size: tuple[int, int]) -> Image.Image:
        result = image.copy()
        result.thumbnail(size, self._resample)
        return result

    def fit(self, image: Image.Image, size: tuple[int, int]) -> Image.Image:
        return ImageOps.fit(image, size, method=self._resample)

    def save(self, image: Image.Image, path: str, extension: str) -> None:
        """Write the image; JPEG targets are flattened onto white."""
        if extension.lower() in JPEG_EXTENSIONS:
            if image.mode in ALPHA_MODES:
                rgba = image.convert("RGBA")
                background = Image.new("RGB", rgba.size, (255, 255, 255))
                background.paste(rgba, mask=rgba.split()[-1])
                image = background
            elif image.mode != "RGB":
                image = image.convert("RGB")
            image.save(path, quality=JPEG_QUALITY)
            return

        image.save(path)
