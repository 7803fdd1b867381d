"""Custom exception classes for the image cover lifecycle."""

from typing import Any

from image_cover.core.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_EXTENSION_NOT_FOUND,
    ERROR_CODE_FILE_REMOVAL_FAILED,
    ERROR_CODE_IMAGE_IO,
    ERROR_CODE_INVALID_CALLBACK_RESULT,
    ERROR_CODE_INVALID_THUMBNAIL,
    ERROR_CODE_STORAGE,
)


class CoverError(Exception):
    """
    Base exception for all image cover errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ConfigurationError(CoverError):
    """Raised at setup time when the cover configuration is unusable."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidThumbnailError(ConfigurationError):
    """Raised when a thumbnail definition fails validation."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_THUMBNAIL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidCallbackResultError(ConfigurationError):
    """Raised when a derived option callback does not return a string."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CALLBACK_RESULT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageError(CoverError):
    """Raised when a directory or the original file cannot be written."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ImageIOError(StorageError):
    """Raised when an image cannot be decoded or encoded."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_IO,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileRemovalError(StorageError):
    """Raised when an existing file cannot be unlinked."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_REMOVAL_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ExtensionLookupError(CoverError, LookupError):
    """Raised when neither a submission nor a stored file name has an extension."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_EXTENSION_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
