"""File and batch scanning.

Drives the read loop for each file (open, chunked read, feed, finalize) and
folds the finalized per-file stats into batch stats. Per-file I/O errors are
recorded on that file's stats and never abort the batch.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import BinaryIO, Optional, Sequence, Union

from ..exceptions import FileOpenError, FileReadError
from ..logging_config import get_logger
from .classifier import LineClassifier, LineSink
from .models import BatchStats, FileStats

logger = get_logger(__name__)

# I/O granularity only; results never depend on it
DEFAULT_CHUNK_SIZE = 1024

PathLike = Union[str, os.PathLike]


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def classify_stream(
    stream: BinaryIO,
    path: str = "",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sink: Optional[LineSink] = None,
) -> FileStats:
    """
    Classify every line of an open binary stream.

    Args:
        stream: Readable binary file-like object
        path: Path recorded on the resulting stats
        chunk_size: Number of bytes requested per read
        sink: Optional callback receiving every finalized line

    Returns:
        Finalized file stats

    Raises:
        OSError: If reading from the stream fails
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    classifier = LineClassifier(path, sink=sink)
    for chunk in iter(partial(stream.read, chunk_size), b""):
        classifier.feed(chunk)
    return classifier.finish()


def scan_file(
    path: PathLike,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sink: Optional[LineSink] = None,
) -> FileStats:
    """
    Scan a single file.

    Open and read failures are returned as stats carrying only the path and
    the error. Counts gathered before a read failure are discarded.

    Args:
        path: File to scan
        chunk_size: Number of bytes requested per read
        sink: Optional callback receiving every finalized line

    Returns:
        Finalized file stats
    """
    path_str = os.fspath(path)
    logger.debug(f"Scanning {path_str}")

    try:
        handle = open(path_str, "rb")
    except OSError as e:
        error = FileOpenError(path_str, _reason(e))
        logger.warning(str(error))
        return FileStats(path=path_str, error=error)

    with handle:
        try:
            return classify_stream(handle, path_str, chunk_size=chunk_size, sink=sink)
        except OSError as e:
            error = FileReadError(path_str, _reason(e))
            logger.warning(str(error))
            return FileStats(path=path_str, error=error)


def scan_batch(
    paths: Sequence[PathLike],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sink: Optional[LineSink] = None,
    workers: int = 1,
) -> BatchStats:
    """
    Scan every path and reduce the results into batch stats.

    Files are independent: with ``workers > 1`` they are scanned on a thread
    pool, but the resulting listing always follows input order.

    Args:
        paths: Files to scan, in report order
        chunk_size: Number of bytes requested per read
        sink: Optional callback receiving every finalized line
        workers: Number of files scanned concurrently

    Returns:
        Batch stats listing every path, failed ones included
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")

    scan = partial(scan_file, chunk_size=chunk_size, sink=sink)
    if workers == 1 or len(paths) < 2:
        results = [scan(p) for p in paths]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(scan, paths))

    batch = BatchStats.from_files(results)
    logger.info(
        f"Scan complete: {len(batch.valid_files)} scanned, {len(batch.failed_files)} errors"
    )
    return batch
