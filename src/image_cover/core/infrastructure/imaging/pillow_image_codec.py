"""Pillow-backed implementation of ImageCodec."""

import os

from aws_lambda_powertools import Logger
from PIL import Image, UnidentifiedImageError

from image_cover.core.infrastructure.adapters.pillow_adapter import (
    PillowAdapter,
    PillowAdapterProtocol,
)
from image_cover.core.models.errors import ImageIOError
from image_cover.core.models.thumbnail import ThumbnailMode
from image_cover.core.repositories.image_codec import ImageCodec
from image_cover.core.utils.constants import (
    ERROR_CODE_IMAGE_OPEN_FAILED,
    ERROR_CODE_IMAGE_SAVE_FAILED,
)

logger = Logger(UTC=True)


class PillowImageCodec(ImageCodec):
    """Image codec backed by Pillow with error handling.

    Pillow and OS errors are caught and translated
    into ImageIOError with stable error codes.
    """

    def __init__(self, adapter: PillowAdapterProtocol | None = None) -> None:
        """Initialize with a Pillow adapter."""
        self._pil: PillowAdapterProtocol = adapter or PillowAdapter()

    def open(self, path: str) -> Image.Image:
        logger.debug("Opening image", extra={"path": path})

        try:
            return self._pil.open(path)

        except (UnidentifiedImageError, OSError) as exc:
            logger.error("Image could not be decoded", extra={"path": path})
            raise ImageIOError(
                message="Unable to open image",
                error_code=ERROR_CODE_IMAGE_OPEN_FAILED,
                details={"path": path, "reason": str(exc)},
            ) from exc

    def size(self, handle: Image.Image) -> tuple[int, int]:
        width, height = handle.size
        return width, height

    def crop_to_box(self, handle: Image.Image, width: int, height: int) -> Image.Image:
        image_width, image_height = handle.size
        return self._pil.crop(handle, (0, 0, min(width, image_width), min(height, image_height)))

    def paste(
        self,
        base: Image.Image,
        overlay: Image.Image,
        x: int = 0,
        y: int = 0,
    ) -> Image.Image:
        return self._pil.paste(base, overlay, (x, y))

    def resize_to_box(
        self,
        handle: Image.Image,
        width: int,
        height: int,
        mode: ThumbnailMode,
    ) -> Image.Image:
        if mode is ThumbnailMode.OUTBOUND:
            image_width, image_height = handle.size
            return self._pil.fit(handle, (min(width, image_width), min(height, image_height)))

        return self._pil.thumbnail(handle, (width, height))

    def save(self, handle: Image.Image, path: str) -> None:
        extension = os.path.splitext(path)[1].lstrip(".")
        logger.debug("Saving image", extra={"path": path, "size": handle.size})

        try:
            self._pil.save(handle, path, extension)

        except (ValueError, OSError) as exc:
            logger.error("Image could not be written", extra={"path": path})
            raise ImageIOError(
                message="Unable to save image",
                error_code=ERROR_CODE_IMAGE_SAVE_FAILED,
                details={"path": path, "reason": str(exc)},
            ) from exc
