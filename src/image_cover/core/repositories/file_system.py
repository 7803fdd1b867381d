"""Abstract contract for the filesystem primitives used by the lifecycle."""

from abc import ABC, abstractmethod


class FileSystem(ABC):
    """Contract for directory and file operations.

    Implementations could be the local disk, a mounted share, an in-memory
    fake, etc. The lifecycle depends on this interface, not the implementation.
    """

    @abstractmethod
    def create_directory(self, path: str) -> bool:
        """Create a directory and its parents.

        Returns:
            True if the directory exists afterwards, False otherwise
        """

    @abstractmethod
    def rename(self, source: str, destination: str) -> bool:
        """Move a file.

        Returns:
            True on success, False if the move failed
        """

    @abstractmethod
    def unlink(self, path: str) -> None:
        """Remove a file. Missing files are ignored.

        Raises:
            FileRemovalError: If an existing file cannot be removed
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at `path`."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if `path` is a regular file."""

    @abstractmethod
    def is_directory_empty(self, path: str) -> bool | None:
        """Return True/False for a readable directory, None if unreadable."""

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """Remove a directory tree."""
