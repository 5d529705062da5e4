"""Errors raised by filemeta file operations."""

from enum import Enum


class FileErrorKind(str, Enum):
    """Reason an open call was rejected."""

    EXISTS = "exists"
    NOT_WRITABLE = "not_writable"
    NOT_READABLE = "not_readable"
    INVALID_MODE = "invalid_mode"


class FileIOError(OSError):
    """
    Descriptive I/O error raised when opening a file fails.

    Args:
        message: Human readable description
        kind: Which check identified the failure
        path: Path the operation was attempted on
    """

    def __init__(self, message: str, kind: FileErrorKind, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.path = path

    def __str__(self) -> str:
        return self.message
