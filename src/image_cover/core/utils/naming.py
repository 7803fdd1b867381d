"""File naming helpers."""

import uuid
from typing import Any

from image_cover.core.utils.constants import FILE_NAME_SEPARATOR, UNIQUE_TOKEN_LENGTH


def unique_token() -> str:
    """Generate a short unique token for file names."""
    return uuid.uuid4().hex[:UNIQUE_TOKEN_LENGTH]


def default_file_name_generator(submission: Any, record: Any) -> str:
    """Build `<base name>_<token>` for an incoming submission."""
    return f"{submission.base_name}{FILE_NAME_SEPARATOR}{unique_token()}"


def thumbnail_path(directory: str, prefix: str, file_name: str) -> str:
    """Location of a thumbnail next to its original."""
    return f"{directory}{prefix}{file_name}"
