"""Exception hierarchy for linestat."""

from .base import LinestatError
from .config import ConfigurationError, InvalidConfigError
from .invocation import InvocationError, LogFileError, OutputWriteError, UsageError
from .scan import FileOpenError, FileReadError, ScanError

__all__ = [
    "LinestatError",
    "ScanError",
    "FileOpenError",
    "FileReadError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvocationError",
    "UsageError",
    "LogFileError",
    "OutputWriteError",
]
