"""Thumbnail definition model."""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)


class ThumbnailMode(str, Enum):
    """How a thumbnail is fitted into its bounding box."""

    INSET = "inset"
    OUTBOUND = "outbound"


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == 0


def _as_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} has to be a number")

    if isinstance(value, (int, float)):
        return float(value)

    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass

    raise ValueError(f"{field} has to be a number")


class ThumbnailSpec(BaseModel):
    """A single derived thumbnail generated next to the original image."""

    model_config = ConfigDict(frozen=True)

    prefix: StrictStr = Field(..., min_length=1, description="File name prefix of the thumbnail")
    width: float = Field(..., gt=0, description="Bounding box width in pixels")
    height: float = Field(..., gt=0, description="Bounding box height in pixels")
    mode: ThumbnailMode = Field(ThumbnailMode.INSET, description="Fit mode inside the box")

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """
        Fill optional keys before field validation.

        - `height` defaults to `width`
        - `mode` defaults to INSET
        """
        if not isinstance(data, dict):
            return data

        values = dict(data)

        if _is_empty(values.get("prefix")):
            raise ValueError("prefix can not be empty")

        if _is_empty(values.get("width")):
            raise ValueError("width has to be not empty")

        if _is_empty(values.get("height")):
            values["height"] = values["width"]

        if _is_empty(values.get("mode")):
            values["mode"] = ThumbnailMode.INSET

        return values

    @field_validator("width", "height", mode="before")
    @classmethod
    def validate_size(cls, value: Any, info: ValidationInfo) -> float:
        return _as_number(value, info.field_name or "size")

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, value: Any) -> ThumbnailMode:
        if isinstance(value, ThumbnailMode):
            return value

        if isinstance(value, str):
            try:
                return ThumbnailMode(value.strip().lower())
            except ValueError:
                pass

        raise ValueError(f"Undefined thumbnail mode '{value}'")

    @property
    def box(self) -> tuple[int, int]:
        """Bounding box rounded to whole pixels."""
        return max(1, round(self.width)), max(1, round(self.height))
