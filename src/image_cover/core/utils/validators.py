"""Configuration validation utilities."""

from collections.abc import Iterable, Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from image_cover.core.models.errors import InvalidThumbnailError
from image_cover.core.models.thumbnail import ThumbnailSpec

logger = Logger(UTC=True)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for error details.

    Removes internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "options"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "greater than 0" in msg_lower:
            msg = "Must be a positive number"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_thumbnails(
    thumbnails: Iterable[ThumbnailSpec | Mapping[str, Any]] | None,
) -> list[ThumbnailSpec]:
    """Validate and normalize thumbnail definitions in order.

    Args:
        thumbnails: Raw thumbnail definitions (dicts or already built specs)

    Returns:
        Normalized list of ThumbnailSpec

    Raises:
        InvalidThumbnailError: On the first invalid definition
    """
    specs: list[ThumbnailSpec] = []

    for index, raw in enumerate(thumbnails or []):
        if isinstance(raw, ThumbnailSpec):
            specs.append(raw)
            continue

        if not isinstance(raw, Mapping):
            raise InvalidThumbnailError(
                message="Thumbnail definition must be a mapping",
                details={"index": index, "type": type(raw).__name__},
            )

        try:
            specs.append(ThumbnailSpec.model_validate(dict(raw)))
        except ValidationError as exc:
            errors = sanitize_validation_errors(exc.errors())
            logger.error(
                "Thumbnail validation failed",
                extra={"index": index, "errors": errors},
            )
            raise InvalidThumbnailError(
                message=f"Invalid thumbnail definition at index {index}: {errors[0]['message']}",
                details={"index": index, "errors": errors},
            ) from exc

    return specs
