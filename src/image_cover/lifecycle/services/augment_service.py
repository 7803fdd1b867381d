"""Watermark and thumbnail generation for an already saved original."""

from aws_lambda_powertools import Logger

from image_cover.core.models.thumbnail import ThumbnailSpec
from image_cover.core.repositories.image_codec import ImageCodec
from image_cover.core.utils.naming import thumbnail_path

logger = Logger(UTC=True)


class AugmentService:
    """Derives images from the saved original.

    Runs after the original is committed; codec errors propagate
    (ImageIOError) and leave the original in place.
    """

    def __init__(
        self,
        *,
        codec: ImageCodec,
        thumbnails: tuple[ThumbnailSpec, ...] = (),
        watermark: str | None = None,
    ) -> None:
        self.codec = codec
        self.thumbnails = thumbnails
        self.watermark = watermark

    def add_watermark(self, image_path: str) -> None:
        """Overlay the configured watermark onto the image in place."""
        if not self.watermark:
            return

        watermark = self.codec.open(self.watermark)
        image = self.codec.open(image_path)
        width, height = self.codec.size(image)

        watermark = self.codec.crop_to_box(watermark, width, height)
        image = self.codec.paste(image, watermark, 0, 0)
        self.codec.save(image, image_path)

        logger.info("Watermark applied", extra={"path": image_path})

    def generate_thumbnails(self, directory: str, file_name: str) -> list[str]:
        """Write every configured thumbnail next to the original.

        Returns:
            Paths of the generated thumbnails
        """
        if not self.thumbnails:
            return []

        image = self.codec.open(f"{directory}{file_name}")
        generated: list[str] = []

        for spec in self.thumbnails:
            width, height = spec.box
            target = thumbnail_path(directory, spec.prefix, file_name)
            thumbnail = self.codec.resize_to_box(image, width, height, spec.mode)
            self.codec.save(thumbnail, target)
            generated.append(target)

        logger.info(
            "Thumbnails generated",
            extra={"original": file_name, "count": len(generated)},
        )
        return generated
