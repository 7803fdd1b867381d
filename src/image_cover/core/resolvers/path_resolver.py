"""Directory and file name resolution for a single lifecycle operation."""

from typing import Any

from aws_lambda_powertools import Logger

from image_cover.core.models.config import CoverConfig
from image_cover.core.models.errors import InvalidCallbackResultError
from image_cover.core.models.options import DerivedOption, LiteralOption
from image_cover.core.utils.constants import PATH_SEPARATOR

logger = Logger(UTC=True)


def resolve_option(
    option: LiteralOption | DerivedOption,
    submission: Any,
    record: Any,
) -> str:
    """Resolve a configured option into a string.

    Raises:
        InvalidCallbackResultError: If a derived option returns a non-string
    """
    if isinstance(option, LiteralOption):
        return option.value

    result = option.func(submission, record)
    if not isinstance(result, str):
        raise InvalidCallbackResultError(
            message=(
                f"Callback function should return a string value. "
                f"Result is {result!r} for {option.name}"
            ),
            details={"callback": option.name, "result_type": type(result).__name__},
        )
    return result


def normalize_directory(path: str) -> str:
    """Ensure a directory path ends with exactly one separator."""
    if not path:
        return path
    return path.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR


class CachedOption:
    """Resolve an option once and keep the result until reset."""

    def __init__(self, option: LiteralOption | DerivedOption) -> None:
        self._option = option
        self._value: str | None = None

    @property
    def is_resolved(self) -> bool:
        return self._value is not None

    def resolve(self, submission: Any, record: Any) -> str:
        if self._value is None:
            self._value = resolve_option(self._option, submission, record)
        return self._value

    def reset(self) -> None:
        self._value = None


class PathResolver:
    """Computes where a record's image lives for the current operation.

    Both values are cached on first use, so the directory and name stay
    stable across the steps of one save, move or delete. The controller
    calls `reset()` when the operation completes.
    """

    def __init__(self, config: CoverConfig) -> None:
        self._config = config
        self._file_path = CachedOption(config.path)
        self._file_name = CachedOption(config.file_name_generator)

    @property
    def is_dynamic(self) -> bool:
        return self._config.is_dynamic_path

    def file_path(self, submission: Any, record: Any) -> str:
        """Target directory, always ending with a separator."""
        return normalize_directory(self._file_path.resolve(submission, record))

    def file_name(self, submission: Any, record: Any) -> str:
        """Target file name without extension."""
        return self._file_name.resolve(submission, record)

    def static_file_path(self) -> str | None:
        """Configured directory when the path is a literal, else None."""
        if isinstance(self._config.path, LiteralOption):
            return normalize_directory(self._config.path.value)
        return None

    def reset(self) -> None:
        if self._file_path.is_resolved or self._file_name.is_resolved:
            logger.debug("Resetting resolved paths")
        self._file_path.reset()
        self._file_name.reset()
