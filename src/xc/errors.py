"""Error types reported by the xc command line."""

from __future__ import annotations


class XcError(Exception):
    """Base class for fatal xc errors. Every one ends the run with status 1."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}"


class FileError(XcError):
    """Raised when the input file is missing or a file cannot be read or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> FileError:
        reason = exc.strerror or str(exc)
        return cls(f"{path}: {reason}", path)


class UsageError(XcError):
    """Raised on a missing pattern, an unknown option or a malformed option value."""


class ConfigError(XcError):
    """Raised on an invalid quota or a malformed config file."""
