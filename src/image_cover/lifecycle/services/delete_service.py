"""Remove a record's stored image and its thumbnails."""

from typing import Any

from aws_lambda_powertools import Logger

from image_cover.core.bridge.attribute_bridge import AttributeBridge, extract_file_name
from image_cover.core.models.config import CoverConfig
from image_cover.core.repositories.file_system import FileSystem
from image_cover.core.resolvers.path_resolver import normalize_directory
from image_cover.core.utils.naming import thumbnail_path

logger = Logger(UTC=True)


class DeleteService:
    """Best-effort removal of the files a record points at.

    Missing files are skipped, so deleting twice is harmless. Record
    attributes are left untouched.
    """

    def __init__(
        self,
        *,
        config: CoverConfig,
        file_system: FileSystem,
        bridge: AttributeBridge,
    ) -> None:
        self.config = config
        self.file_system = file_system
        self.bridge = bridge

    def delete(self, record: Any) -> list[str]:
        """Delete the original and every configured thumbnail.

        Thumbnails are named after the stored file name, the same name the
        save and move operations use for them.

        Returns:
            Paths that were removed

        Raises:
            FileRemovalError: If an existing file cannot be removed
        """
        file_name = self.bridge.model_file_name(record) or extract_file_name(
            self.bridge.stored_value(record)
        )
        if not file_name:
            logger.debug("No stored image to delete")
            return []

        directory = normalize_directory(self.bridge.model_file_path(record) or "")
        removed: list[str] = []

        original = f"{directory}{file_name}"
        if self.file_system.is_file(original):
            self.file_system.unlink(original)
            removed.append(original)

        removed.extend(self._delete_thumbnails(directory, file_name))

        logger.info(
            "Image files deleted",
            extra={"original": original, "removed": len(removed)},
        )
        return removed

    def _delete_thumbnails(self, directory: str, file_name: str) -> list[str]:
        removed: list[str] = []
        for spec in self.config.thumbnails:
            path = thumbnail_path(directory, spec.prefix, file_name)
            if self.file_system.is_file(path):
                self.file_system.unlink(path)
                removed.append(path)

        return removed
