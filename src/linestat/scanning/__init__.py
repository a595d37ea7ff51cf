"""Line classification and file/batch scanning."""

from .classifier import (
    CategoryAccumulator,
    ClassifierState,
    LineClassifier,
    LineCounts,
    LineSink,
    LoggingLineSink,
    classify_bytes,
)
from .models import BatchStats, FileStats
from .scanner import DEFAULT_CHUNK_SIZE, classify_stream, scan_batch, scan_file

__all__ = [
    "CategoryAccumulator",
    "ClassifierState",
    "LineClassifier",
    "LineCounts",
    "LineSink",
    "LoggingLineSink",
    "classify_bytes",
    "BatchStats",
    "FileStats",
    "DEFAULT_CHUNK_SIZE",
    "classify_stream",
    "scan_batch",
    "scan_file",
]
