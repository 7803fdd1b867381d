"""Cover configuration model."""

import os
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic import ValidationError as PydanticValidationError

from image_cover.core.models.errors import ConfigurationError
from image_cover.core.models.options import (
    ConfigOption,
    DerivedOption,
    LiteralOption,
    as_option,
    is_derived,
)
from image_cover.core.models.thumbnail import ThumbnailSpec
from image_cover.core.utils.constants import (
    DEFAULT_RELATION_ATTRIBUTE,
    ENV_COVER_UPLOAD_PATH,
)
from image_cover.core.utils.naming import default_file_name_generator
from image_cover.core.utils.validators import sanitize_validation_errors, validate_thumbnails

logger = Logger(UTC=True)


class CoverConfig(BaseModel):
    """Per record type configuration of the image lifecycle.

    Build instances with `CoverConfig.create(...)`, which applies defaults
    and turns validation failures into ConfigurationError.
    """

    model_config = ConfigDict(frozen=True)

    model_attribute: StrictStr = Field(
        ..., min_length=1, description="Attribute holding the file name (or path + name)"
    )
    model_attribute_file_path: StrictStr | None = Field(
        None, description="Optional attribute holding the directory (split mode)"
    )
    relation_attribute: StrictStr = Field(
        DEFAULT_RELATION_ATTRIBUTE, min_length=1, description="Virtual field bound to the upload"
    )
    thumbnails: tuple[ThumbnailSpec, ...] = Field((), description="Thumbnails to derive")
    simple_request: StrictBool = Field(
        False, description="Look uploads up by plain field name instead of Form[field]"
    )
    path: ConfigOption = Field(..., description="Target directory, fixed or derived")
    watermark: StrictStr | None = Field(None, description="Path to the watermark image")
    file_name_generator: ConfigOption = Field(..., description="File name, fixed or derived")

    @property
    def is_split(self) -> bool:
        return bool(self.model_attribute_file_path)

    @property
    def is_dynamic_path(self) -> bool:
        return is_derived(self.path)

    @classmethod
    def create(
        cls,
        *,
        path: Any = None,
        default_path: str | None = None,
        file_name_generator: Any = None,
        thumbnails: Any = None,
        **options: Any,
    ) -> "CoverConfig":
        """Validate raw options into a configuration.

        Args:
            path: Directory string, callable, or option variant
            default_path: Directory injected by the embedding application,
                used when `path` is empty
            file_name_generator: Callable or option variant
            thumbnails: Thumbnail definitions
            **options: Remaining CoverConfig fields

        Raises:
            ConfigurationError: If any option is invalid
        """
        specs = validate_thumbnails(thumbnails)

        if not path:
            path = default_path or os.getenv(ENV_COVER_UPLOAD_PATH)
        if not path:
            raise ConfigurationError(
                message=(
                    "Upload path is not configured. "
                    f"Set `path`, `default_path` or {ENV_COVER_UPLOAD_PATH}"
                ),
                details={"field": "path"},
            )

        try:
            path_option = as_option(path)
        except TypeError as exc:
            raise ConfigurationError(
                message="path should be a string or a callback function",
                details={"field": "path", "type": type(path).__name__},
            ) from exc

        generator_option = cls._generator_option(file_name_generator)

        try:
            config = cls.model_validate(
                {
                    **options,
                    "path": path_option,
                    "file_name_generator": generator_option,
                    "thumbnails": tuple(specs),
                }
            )
        except PydanticValidationError as exc:
            errors = sanitize_validation_errors(exc.errors())
            logger.error("Cover configuration is invalid", extra={"errors": errors})
            raise ConfigurationError(
                message="Invalid cover configuration",
                details={"errors": errors},
            ) from exc

        logger.debug(
            "Cover configuration created",
            extra={
                "model_attribute": config.model_attribute,
                "split": config.is_split,
                "dynamic_path": config.is_dynamic_path,
                "thumbnails": len(config.thumbnails),
            },
        )
        return config

    @staticmethod
    def _generator_option(value: Any) -> LiteralOption | DerivedOption:
        if value is None:
            return DerivedOption(func=default_file_name_generator)

        if isinstance(value, (LiteralOption, DerivedOption)):
            return value

        if callable(value):
            return DerivedOption(func=value)

        raise ConfigurationError(
            message="file_name_generator should be a callback function",
            details={"field": "file_name_generator", "type": type(value).__name__},
        )
