"""Unit tests for configuration validation utilities."""

import pytest

from image_cover.core.models.errors import InvalidThumbnailError
from image_cover.core.models.thumbnail import ThumbnailMode, ThumbnailSpec
from image_cover.core.utils.validators import (
    sanitize_validation_errors,
    validate_thumbnails,
)


class TestSanitizeValidationErrors:
    """Tests for sanitize_validation_errors."""

    def test_sanitizes_required_field(self) -> None:
        errors = [
            {
                "loc": ("model_attribute",),
                "msg": "Field required",
            }
        ]

        result = sanitize_validation_errors(errors)

        assert result == [
            {
                "field": "model_attribute",
                "message": "This field is required",
            }
        ]

    def test_defaults_field_to_options(self) -> None:
        errors = [{"msg": "Invalid value"}]

        result = sanitize_validation_errors(errors)

        assert result == [
            {
                "field": "options",
                "message": "Invalid value",
            }
        ]

    def test_removes_value_error_prefix(self) -> None:
        errors = [{"loc": (), "msg": "Value error, prefix can not be empty"}]

        result = sanitize_validation_errors(errors)

        assert result[0]["message"] == "prefix can not be empty"

    def test_positive_number_message(self) -> None:
        errors = [{"loc": ("width",), "msg": "Input should be greater than 0"}]

        result = sanitize_validation_errors(errors)

        assert result[0] == {"field": "width", "message": "Must be a positive number"}

    def test_nested_location_is_dotted(self) -> None:
        errors = [{"loc": ("thumbnails", 0, "width"), "msg": "Invalid value"}]

        result = sanitize_validation_errors(errors)

        assert result[0]["field"] == "thumbnails.0.width"


class TestValidateThumbnails:
    """Tests for validate_thumbnails."""

    def test_none_returns_empty_list(self) -> None:
        assert validate_thumbnails(None) == []

    def test_width_only_fills_height_and_mode(self) -> None:
        specs = validate_thumbnails([{"prefix": "sm_", "width": 100}])

        assert specs[0].height == 100
        assert specs[0].mode is ThumbnailMode.INSET

    def test_built_specs_pass_through(self) -> None:
        spec = ThumbnailSpec.model_validate({"prefix": "sm_", "width": 100})

        assert validate_thumbnails([spec]) == [spec]

    def test_missing_prefix(self) -> None:
        with pytest.raises(InvalidThumbnailError, match="prefix can not be empty") as exc:
            validate_thumbnails([{"width": 100}])

        assert exc.value.details["index"] == 0

    def test_missing_width(self) -> None:
        with pytest.raises(InvalidThumbnailError, match="width has to be not empty"):
            validate_thumbnails([{"prefix": "sm_"}])

    def test_first_violation_aborts(self) -> None:
        with pytest.raises(InvalidThumbnailError) as exc:
            validate_thumbnails(
                [
                    {"prefix": "ok_", "width": 10},
                    {"prefix": "bad_", "width": 10, "mode": "zoom"},
                    {"prefix": "", "width": 10},
                ]
            )

        assert exc.value.details["index"] == 1
        assert "Undefined thumbnail mode" in exc.value.message

    def test_non_mapping_definition(self) -> None:
        with pytest.raises(InvalidThumbnailError, match="must be a mapping"):
            validate_thumbnails(["sm_"])
