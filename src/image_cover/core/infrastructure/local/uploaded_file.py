"""Temp-file backed submission."""

import os
import shutil
from pathlib import Path

from aws_lambda_powertools import Logger

logger = Logger(UTC=True)


class UploadedFile:
    """A file received by the transport layer and parked in a temp location.

    Satisfies the Submission protocol.
    """

    def __init__(
        self,
        *,
        name: str,
        temp_name: str | os.PathLike[str],
    ) -> None:
        self.name = name
        self.temp_name = os.fspath(temp_name)

    def __repr__(self) -> str:
        return f"UploadedFile(name={self.name!r}, temp_name={self.temp_name!r})"

    @property
    def base_name(self) -> str:
        """Original file name without its extension."""
        return Path(self.name).stem

    @property
    def extension(self) -> str:
        """Lower-case extension without the leading dot."""
        return Path(self.name).suffix.lower().lstrip(".")

    def save_as(self, path: str, delete_temp_file: bool = True) -> bool:
        """Persist the upload to `path`.

        Returns:
            True if the file was written, False otherwise
        """
        try:
            if delete_temp_file:
                shutil.move(self.temp_name, path)
            else:
                shutil.copyfile(self.temp_name, path)
        except (OSError, shutil.Error):
            logger.exception(
                "Failed to save uploaded file",
                extra={"upload_name": self.name, "path": path},
            )
            return False

        if delete_temp_file:
            self.temp_name = path

        return True
