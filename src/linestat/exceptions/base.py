"""Root of the linestat error hierarchy.

Two families hang off ``LinestatError``. ``ScanError`` subclasses never
escape a scan: they are stored on the failed file's ``FileStats`` and shown
in its Error column. ``ConfigurationError`` and ``InvocationError``
subclasses stop the command and map to its exit code.
"""

from typing import Dict, Optional


class LinestatError(Exception):
    """Error carrying a short message plus key/value context.

    The string form is what the report shows for a failed file: the
    message, then ``details`` (OS reason, offending option) in parentheses.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        # "Cannot open file: a.c (reason=No such file or directory)"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
