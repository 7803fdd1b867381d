"""Relocate a stored image when its derived directory changes."""

from typing import Any

from aws_lambda_powertools import Logger

from image_cover.core.bridge.attribute_bridge import AttributeBridge
from image_cover.core.models.thumbnail import ThumbnailSpec
from image_cover.core.repositories.file_system import FileSystem
from image_cover.core.utils.naming import thumbnail_path

logger = Logger(UTC=True)


class MoveService:
    """Moves the original and its thumbnails to a new directory.

    Move failures are reported, not raised: the record keeps pointing at
    whichever location actually holds the file.
    """

    def __init__(
        self,
        *,
        file_system: FileSystem,
        bridge: AttributeBridge,
        thumbnails: tuple[ThumbnailSpec, ...] = (),
    ) -> None:
        self.file_system = file_system
        self.bridge = bridge
        self.thumbnails = thumbnails

    def move(self, record: Any, old_path: str, new_path: str) -> bool:
        """Move the stored image of a record from `old_path` to `new_path`.

        The file name is kept. The old directory is removed when the move
        leaves it empty.

        Returns:
            True if the original was moved, False otherwise
        """
        file_name = self.bridge.model_file_name(record)
        if not file_name:
            logger.warning("No stored file to move")
            return False

        logger.debug(
            "Moving image",
            extra={"file_name": file_name, "old_path": old_path, "new_path": new_path},
        )

        moved = self.file_system.create_directory(new_path) and self.file_system.rename(
            f"{old_path}{file_name}", f"{new_path}{file_name}"
        )

        if moved:
            self._move_thumbnails(old_path, new_path, file_name)
            self.bridge.set_model_full_file_name(record, new_path, file_name)
            logger.info(
                "Image moved",
                extra={"file_name": file_name, "new_path": new_path},
            )
        else:
            logger.warning(
                "Image could not be moved",
                extra={"file_name": file_name, "old_path": old_path, "new_path": new_path},
            )

        if self.file_system.is_directory_empty(old_path):
            self.file_system.remove_directory(old_path)

        return moved

    def _move_thumbnails(self, old_path: str, new_path: str, file_name: str) -> None:
        for spec in self.thumbnails:
            source = thumbnail_path(old_path, spec.prefix, file_name)
            if not self.file_system.is_file(source):
                continue

            if not self.file_system.rename(source, thumbnail_path(new_path, spec.prefix, file_name)):
                logger.warning(
                    "Thumbnail could not be moved",
                    extra={"source": source, "prefix": spec.prefix},
                )
