"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Configuration Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_CODE_INVALID_THUMBNAIL = "INVALID_THUMBNAIL"
ERROR_CODE_INVALID_CALLBACK_RESULT = "INVALID_CALLBACK_RESULT"
ERROR_CODE_MISSING_ACCESSOR = "MISSING_ACCESSOR"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_DIRECTORY_CREATE_FAILED = "DIRECTORY_CREATE_FAILED"
ERROR_CODE_FILE_SAVE_FAILED = "FILE_SAVE_FAILED"
ERROR_CODE_FILE_REMOVAL_FAILED = "FILE_REMOVAL_FAILED"

# Image Codec Errors
ERROR_CODE_IMAGE_IO = "IMAGE_IO_ERROR"
ERROR_CODE_IMAGE_OPEN_FAILED = "IMAGE_OPEN_FAILED"
ERROR_CODE_IMAGE_SAVE_FAILED = "IMAGE_SAVE_FAILED"

# Lookup Errors
ERROR_CODE_EXTENSION_NOT_FOUND = "EXTENSION_NOT_FOUND"


# ============================================================================
# Record Binding
# ============================================================================

DEFAULT_RELATION_ATTRIBUTE = "image"
PATH_SEPARATOR = "/"

# Matches the trailing file name of a combined path+name attribute
FILE_NAME_PATTERN: Final[str] = r"[a-zA-Z0-9\-_]*\.\w{3,4}$"

# ============================================================================
# File Naming
# ============================================================================

UNIQUE_TOKEN_LENGTH = 13
FILE_NAME_SEPARATOR = "_"

# ============================================================================
# Image Processing
# ============================================================================

JPEG_EXTENSIONS: Final[frozenset[str]] = frozenset({"jpg", "jpeg"})
ALPHA_MODES: Final[frozenset[str]] = frozenset({"RGBA", "LA", "P"})
JPEG_QUALITY = 90

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_COVER_UPLOAD_PATH = "COVER_UPLOAD_PATH"
