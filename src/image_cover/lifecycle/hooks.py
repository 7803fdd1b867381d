"""Abstract contract for record lifecycle hooks."""

from abc import ABC, abstractmethod
from typing import Any


class RecordLifecycleHooks(ABC):
    """Points in a record's lifecycle an embedding persistence layer calls.

    Implementations could be wired into SQLAlchemy events, Django signals,
    a repository's save/delete methods, etc.
    """

    @abstractmethod
    def before_validate(self, record: Any) -> bool:
        """Called before the record is validated."""

    @abstractmethod
    def before_insert(self, record: Any) -> bool:
        """Called before a new record is persisted."""

    @abstractmethod
    def before_update(self, record: Any) -> bool:
        """Called before an existing record is persisted."""

    @abstractmethod
    def after_delete(self, record: Any) -> None:
        """Called after the record was deleted."""
