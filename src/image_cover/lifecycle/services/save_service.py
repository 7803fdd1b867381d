"""Persist an incoming submission as the record's original image."""

from typing import Any

from aws_lambda_powertools import Logger

from image_cover.core.bridge.attribute_bridge import AttributeBridge
from image_cover.core.models.errors import StorageError
from image_cover.core.repositories.file_system import FileSystem
from image_cover.core.repositories.upload_binder import Submission
from image_cover.core.resolvers.path_resolver import PathResolver
from image_cover.core.utils.constants import (
    ERROR_CODE_DIRECTORY_CREATE_FAILED,
    ERROR_CODE_FILE_SAVE_FAILED,
)

logger = Logger(UTC=True)


class SaveService:
    """Writes the original file and points the record at it.

    The save flow is:
    1. Resolve directory, file name and extension
    2. Create the directory
    3. Save the submission into it
    4. Update the record attributes

    Steps 2 and 3 are fatal on failure; attributes are only written
    once the file exists on disk.
    """

    def __init__(
        self,
        *,
        file_system: FileSystem,
        bridge: AttributeBridge,
        resolver: PathResolver,
    ) -> None:
        self.file_system = file_system
        self.bridge = bridge
        self.resolver = resolver

    def save(self, record: Any, submission: Submission) -> tuple[str, str]:
        """Save the submission for a record.

        Args:
            record: Record owning the image
            submission: Incoming file

        Returns:
            Tuple of (directory, file name with extension)

        Raises:
            StorageError: If the directory or the file cannot be written
            InvalidCallbackResultError: If a derived option misbehaves
        """
        file_path = self.resolver.file_path(submission, record)
        extension = self.bridge.file_extension(record, submission)
        file_name = f"{self.resolver.file_name(submission, record)}.{extension}"
        target = f"{file_path}{file_name}"

        logger.debug(
            "Saving uploaded image",
            extra={"upload_name": submission.name, "target": target},
        )

        if not self.file_system.create_directory(file_path):
            raise StorageError(
                message=f"{submission.name} not saved.",
                error_code=ERROR_CODE_DIRECTORY_CREATE_FAILED,
                details={"name": submission.name, "directory": file_path},
            )

        if not submission.save_as(target):
            raise StorageError(
                message=f"{submission.name} not saved.",
                error_code=ERROR_CODE_FILE_SAVE_FAILED,
                details={"name": submission.name, "target": target},
            )

        self.bridge.set_model_full_file_name(record, file_path, file_name)

        logger.info("Image saved", extra={"upload_name": submission.name, "target": target})
        return file_path, file_name
