"""Invocation-level errors. These are fatal to the whole run."""

from .base import LinestatError


class InvocationError(LinestatError):
    """Base class for errors that abort the invocation."""

    exit_code = 1


class UsageError(InvocationError):
    """No input paths were given."""

    exit_code = 1


class OutputWriteError(InvocationError):
    """The TSV destination cannot be created or written."""

    exit_code = 2

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write output: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class LogFileError(InvocationError):
    """The ``--log-file`` destination cannot be opened."""

    exit_code = 1

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot open log file: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason
