"""Contracts for incoming uploads and how they are bound to records."""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Submission(Protocol):
    """An incoming file that has not been persisted yet."""

    name: str
    base_name: str
    extension: str

    def save_as(self, path: str) -> bool: ...


class UploadBinder(ABC):
    """Contract for looking up the submission sent for a field.

    Implementations adapt a web framework request (Flask, Django, Starlette)
    or a plain mapping of files.
    """

    @abstractmethod
    def get_instance_by_name(self, name: str) -> Submission | None:
        """Return the upload sent under a plain field name like `image`."""

    @abstractmethod
    def get_instance(self, record: Any, attribute: str) -> Submission | None:
        """Return the upload sent for a record field like `Article[image]`."""
