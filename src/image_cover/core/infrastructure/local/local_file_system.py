"""Local disk implementation of FileSystem."""

import os
import shutil

from aws_lambda_powertools import Logger

from image_cover.core.models.errors import FileRemovalError
from image_cover.core.repositories.file_system import FileSystem

logger = Logger(UTC=True)


class LocalFileSystem(FileSystem):
    """Filesystem primitives on the local disk.

    Directory creation and moves report failure as False so callers
    decide whether it is fatal. Unlink failures on existing files are
    translated into FileRemovalError.
    """

    def __init__(self, directory_mode: int = 0o775) -> None:
        self._directory_mode = directory_mode

    def create_directory(self, path: str) -> bool:
        if os.path.isdir(path):
            return True

        try:
            os.makedirs(path, mode=self._directory_mode, exist_ok=True)
        except OSError:
            logger.exception("Failed to create directory", extra={"path": path})
            return False

        logger.debug("Directory created", extra={"path": path})
        return True

    def rename(self, source: str, destination: str) -> bool:
        try:
            os.replace(source, destination)
        except OSError:
            try:
                # Cross-device moves are not supported by os.replace
                shutil.move(source, destination)
            except (OSError, shutil.Error):
                logger.warning(
                    "Failed to move file",
                    extra={"source": source, "destination": destination},
                )
                return False

        logger.debug("File moved", extra={"source": source, "destination": destination})
        return True

    def unlink(self, path: str) -> None:
        try:
            os.unlink(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.exception("Failed to remove file", extra={"path": path})
            raise FileRemovalError(
                message="Unable to remove file",
                details={"path": path},
            ) from exc

        logger.debug("File removed", extra={"path": path})

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_directory_empty(self, path: str) -> bool | None:
        if not os.path.isdir(path) or not os.access(path, os.R_OK):
            return None

        with os.scandir(path) as entries:
            return next(entries, None) is None

    def remove_directory(self, path: str) -> None:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug("Directory removed", extra={"path": path})
