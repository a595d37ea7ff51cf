"""Per-file scan errors: recorded on the file's stats, never raised out of a batch."""

from .base import LinestatError


class ScanError(LinestatError):
    """Base class for errors tied to a single scanned file."""

    def __init__(self, message: str, path: str, reason: str):
        super().__init__(message, details={"reason": reason})
        self.path = path
        self.reason = reason


class FileOpenError(ScanError):
    """The path does not exist or cannot be opened for reading."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot open file: {path}", path, reason)


class FileReadError(ScanError):
    """An I/O error occurred after the file was opened."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read file: {path}", path, reason)
