"""
Base error hierarchy for hosts-file editing.

All errors raised by the package inherit from ``HostsError`` so callers
can catch a single base type.  "Host not found" is never an error.
"""
from __future__ import annotations

from pathlib import Path


class HostsError(Exception):
    """Base class for all hosts editing errors."""


class StorageUnavailableError(HostsError, OSError):
    """Raised when the hosts file cannot be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)

    @property
    def not_found(self) -> bool:
        """``True`` when the underlying failure was a missing file."""
        return isinstance(self.__cause__, FileNotFoundError)


class MalformedStrictDocumentError(HostsError):
    """Raised by a strict load when the file has duplicate or unparsed rows."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class InvalidEntryError(HostsError, ValueError):
    """Raised when an edit is requested with a malformed host or IP."""
