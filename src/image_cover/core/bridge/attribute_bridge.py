"""Read and write the record attributes that describe where an image lives.

Two addressing modes are supported:

- split: directory and file name live in two attributes
- combined: one attribute holds the file name, prefixed with the directory
  when the directory is derived from the record
"""

import re
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from image_cover.core.models.config import CoverConfig
from image_cover.core.models.errors import ConfigurationError, ExtensionLookupError
from image_cover.core.resolvers.path_resolver import PathResolver
from image_cover.core.utils.constants import (
    ERROR_CODE_MISSING_ACCESSOR,
    FILE_NAME_PATTERN,
    PATH_SEPARATOR,
)

_FILE_NAME_RE = re.compile(FILE_NAME_PATTERN, re.IGNORECASE)


class AttributeAccessor(NamedTuple):
    """Getter/setter pair for one logical record field."""

    get: Callable[[Any], Any]
    set: Callable[[Any, Any], None]


def attribute_accessor(name: str) -> AttributeAccessor:
    """Accessor for plain object attributes."""

    def _set(record: Any, value: Any) -> None:
        setattr(record, name, value)

    return AttributeAccessor(get=lambda record: getattr(record, name, None), set=_set)


def item_accessor(key: str) -> AttributeAccessor:
    """Accessor for dict-like records."""

    def _set(record: Any, value: Any) -> None:
        record[key] = value

    return AttributeAccessor(get=lambda record: record.get(key), set=_set)


def extract_file_name(value: str) -> str | None:
    """Trailing `name.ext` of a stored reference, None if it does not match."""
    match = _FILE_NAME_RE.search(value)
    return match.group(0) if match else None


class AttributeBridge:
    """Translates between RecordFileState and record attributes."""

    def __init__(
        self,
        config: CoverConfig,
        resolver: PathResolver,
        accessors: Mapping[str, AttributeAccessor],
    ) -> None:
        required = [config.model_attribute]
        if config.model_attribute_file_path:
            required.append(config.model_attribute_file_path)

        missing = [name for name in required if name not in accessors]
        if missing:
            raise ConfigurationError(
                message=f"No accessor registered for attributes: {', '.join(missing)}",
                error_code=ERROR_CODE_MISSING_ACCESSOR,
                details={"missing": missing},
            )

        self._config = config
        self._resolver = resolver
        self._accessors = dict(accessors)

    @classmethod
    def for_attributes(cls, config: CoverConfig, resolver: PathResolver) -> "AttributeBridge":
        return cls(config, resolver, cls._build(config, attribute_accessor))

    @classmethod
    def for_mapping(cls, config: CoverConfig, resolver: PathResolver) -> "AttributeBridge":
        return cls(config, resolver, cls._build(config, item_accessor))

    @staticmethod
    def _build(
        config: CoverConfig,
        factory: Callable[[str], AttributeAccessor],
    ) -> dict[str, AttributeAccessor]:
        accessors = {config.model_attribute: factory(config.model_attribute)}
        if config.model_attribute_file_path:
            accessors[config.model_attribute_file_path] = factory(config.model_attribute_file_path)
        return accessors

    def read(self, record: Any, name: str) -> Any:
        return self._accessors[name].get(record)

    def write(self, record: Any, name: str, value: Any) -> None:
        self._accessors[name].set(record, value)

    def stored_value(self, record: Any) -> str:
        """Raw value of the main attribute, empty string when unset."""
        value = self.read(record, self._config.model_attribute)
        return value if isinstance(value, str) else ""

    def has_stored_file(self, record: Any) -> bool:
        return bool(self.stored_value(record))

    def model_file_path(self, record: Any) -> str | None:
        """Directory of the stored file, None when it cannot be known."""
        if self._config.model_attribute_file_path:
            value = self.read(record, self._config.model_attribute_file_path)
            return value or None

        if self._config.is_dynamic_path:
            stored = self.stored_value(record)
            separator = stored.rfind(PATH_SEPARATOR)
            return stored[: separator + 1] if separator >= 0 else None

        return self._resolver.static_file_path()

    def model_file_name(self, record: Any) -> str | None:
        """File name (with extension) of the stored file."""
        stored = self.stored_value(record)
        if not stored:
            return None

        if self._config.is_split:
            return stored

        if self._config.is_dynamic_path:
            return stored.rsplit(PATH_SEPARATOR, 1)[-1] or None

        return stored

    def model_full_file_name(self, record: Any) -> str | None:
        """Full reference of the stored file, None when nothing is stored."""
        file_name = self.model_file_name(record)
        if not file_name:
            return None
        return f"{self.model_file_path(record) or ''}{file_name}"

    def set_model_full_file_name(self, record: Any, file_path: str, file_name: str) -> None:
        if self._config.model_attribute_file_path:
            self.write(record, self._config.model_attribute_file_path, file_path)
            self.write(record, self._config.model_attribute, file_name)
        elif self._config.is_dynamic_path:
            self.write(record, self._config.model_attribute, f"{file_path}{file_name}")
        else:
            self.write(record, self._config.model_attribute, file_name)

    def file_extension(self, record: Any, submission: Any = None) -> str:
        """Extension of the incoming submission, else of the stored file.

        Raises:
            ExtensionLookupError: If neither is available
        """
        if submission is not None:
            return submission.extension

        stored = self.stored_value(record)
        file_name = stored.rsplit(PATH_SEPARATOR, 1)[-1]
        if "." in file_name:
            return file_name.rsplit(".", 1)[1]

        raise ExtensionLookupError(
            message=(
                f'"{self._config.relation_attribute}" and "{self._config.model_attribute}" '
                "haven't uploaded files."
            ),
            details={
                "relation_attribute": self._config.relation_attribute,
                "model_attribute": self._config.model_attribute,
            },
        )
