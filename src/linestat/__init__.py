"""
linestat - line-oriented source-code statistics.

Classifies every line of a source file as code, comment or empty with a
streaming byte-level state machine (``//`` and ``/* */`` comments), and
reduces per-file statistics into batch statistics.
"""

__version__ = "0.1.0"

from .scanning import (
    BatchStats,
    FileStats,
    LineClassifier,
    classify_bytes,
    classify_stream,
    scan_batch,
    scan_file,
)

__all__ = [
    "scan_batch",  # Main entry point
    "scan_file",
    "classify_stream",
    "classify_bytes",
    "LineClassifier",
    "FileStats",
    "BatchStats",
]
