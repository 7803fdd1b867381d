"""Mapping-backed implementation of UploadBinder."""

from collections.abc import Mapping
from typing import Any

from image_cover.core.repositories.upload_binder import Submission, UploadBinder


def form_name(record: Any) -> str:
    """Form name of a record, its class name by default.

    Records may override it with a `form_name` attribute or method.
    """
    custom = getattr(record, "form_name", None)
    if callable(custom):
        custom = custom()
    if isinstance(custom, str) and custom:
        return custom
    return type(record).__name__


class MappingUploadBinder(UploadBinder):
    """Look uploads up in a mapping of field name to submission.

    The mapping is usually built from a request's files, e.g.
    ``{"Article[image]": UploadedFile(...)}`` or ``{"image": UploadedFile(...)}``.
    """

    def __init__(self, files: Mapping[str, Any] | None = None) -> None:
        self._files: dict[str, Any] = dict(files or {})

    def add(self, field: str, submission: Submission) -> None:
        self._files[field] = submission

    def clear(self) -> None:
        self._files.clear()

    def get_instance_by_name(self, name: str) -> Submission | None:
        candidate = self._files.get(name)
        return candidate if isinstance(candidate, Submission) else None

    def get_instance(self, record: Any, attribute: str) -> Submission | None:
        return self.get_instance_by_name(f"{form_name(record)}[{attribute}]")
