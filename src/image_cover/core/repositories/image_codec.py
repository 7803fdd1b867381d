"""Abstract contract for image decoding, manipulation and encoding."""

from abc import ABC, abstractmethod
from typing import Any

from image_cover.core.models.thumbnail import ThumbnailMode

ImageHandle = Any


class ImageCodec(ABC):
    """Contract for the image operations the lifecycle needs.

    Implementations could be Pillow, Wand, pyvips, etc.
    The lifecycle depends on this interface, not the implementation.
    """

    @abstractmethod
    def open(self, path: str) -> ImageHandle:
        """Decode an image file.

        Raises:
            ImageIOError: If the file is unreadable or not an image
        """

    @abstractmethod
    def size(self, handle: ImageHandle) -> tuple[int, int]:
        """Return (width, height) of the image."""

    @abstractmethod
    def crop_to_box(self, handle: ImageHandle, width: int, height: int) -> ImageHandle:
        """Crop from the (0, 0) origin to at most width x height."""

    @abstractmethod
    def paste(
        self,
        base: ImageHandle,
        overlay: ImageHandle,
        x: int = 0,
        y: int = 0,
    ) -> ImageHandle:
        """Return `base` with `overlay` composited at (x, y)."""

    @abstractmethod
    def resize_to_box(
        self,
        handle: ImageHandle,
        width: int,
        height: int,
        mode: ThumbnailMode,
    ) -> ImageHandle:
        """Fit the image into a box.

        INSET keeps the whole image inside the box, preserving aspect ratio.
        OUTBOUND fills the box entirely and crops the overflow.
        Neither mode upscales.
        """

    @abstractmethod
    def save(self, handle: ImageHandle, path: str) -> None:
        """Encode the image to `path`, format chosen by extension.

        Raises:
            ImageIOError: If writing fails
        """
