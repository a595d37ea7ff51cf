"""Streaming line classifier.

Classifies every byte of a stream as code, comment or neither, one byte at a
time with a single byte of lookbehind. Only ``//`` line comments and
``/* */`` block comments are recognized. String literals are not parsed, so
``"//"`` inside a string starts a comment; the classification is a heuristic.

Per byte:
    - ``/`` after ``/`` outside any comment opens a line comment
    - ``/`` after ``*`` inside a block comment closes it
    - ``*`` after ``/`` outside any comment opens a block comment
    - ``\\n`` ends the line
    - ``\\r``, space and tab count toward nothing but the line's total
    - anything else is a comment byte inside a comment, a code byte otherwise

Delimiter bytes (``/`` and ``*``) count toward the line's total only.
Block comments do not nest: the first ``*/`` closes the block.

The state survives chunk boundaries, so feeding the same bytes in chunks of
any size yields identical results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..logging_config import get_logger
from .models import FileStats

_SLASH = ord("/")
_STAR = ord("*")
_NEWLINE = ord("\n")
_BLANKS = frozenset(b"\r \t")


@dataclass
class LineCounts:
    """Byte counts of one physical line."""

    number: int = 0
    code: int = 0
    comment: int = 0
    total: int = 0


LineSink = Callable[[str, LineCounts], None]


@dataclass
class ClassifierState:
    """State carried from one byte (and one chunk) to the next.

    At most one of ``in_block_comment`` and ``in_line_comment`` is set.
    ``in_line_comment`` is cleared at every line boundary.
    """

    line: LineCounts = field(default_factory=LineCounts)
    in_block_comment: bool = False
    in_line_comment: bool = False
    prev_byte: Optional[int] = None

    @property
    def in_comment(self) -> bool:
        return self.in_block_comment or self.in_line_comment


@dataclass
class CategoryAccumulator:
    """Running sum and maximum of one byte category across lines."""

    total: int = 0
    maximum: int = 0

    def add(self, value: int) -> None:
        self.total += value
        if value > self.maximum:
            self.maximum = value

    def average(self, lines: int) -> Optional[float]:
        if lines == 0:
            return None
        return self.total / lines


@dataclass
class LineTally:
    """Per-file line counters and byte accumulators."""

    lines_all: int = 0
    lines_code: int = 0
    lines_comment: int = 0
    lines_empty: int = 0
    bytes_all: CategoryAccumulator = field(default_factory=CategoryAccumulator)
    bytes_code: CategoryAccumulator = field(default_factory=CategoryAccumulator)
    bytes_comment: CategoryAccumulator = field(default_factory=CategoryAccumulator)


class LoggingLineSink:
    """Line sink writing one DEBUG record per finalized line."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger(__name__)

    def __call__(self, path: str, line: LineCounts) -> None:
        self.logger.debug(
            "%s: Line %4d:  [%3d %3d %3d]", path, line.number, line.code, line.comment, line.total
        )


class LineClassifier:
    """Single-pass classifier for one byte stream.

    Feed chunks with :meth:`feed`, then call :meth:`finish` once the stream is
    exhausted. A trailing line without ``\\n`` is counted as if terminated.
    """

    def __init__(self, path: str = "", sink: Optional[LineSink] = None):
        self.path = path
        self.sink = sink
        self.reset()

    def reset(self) -> None:
        self.state = ClassifierState()
        self.tally = LineTally()

    def feed(self, chunk: bytes) -> None:
        state = self.state
        for b in chunk:
            state.line.total += 1

            if b == _SLASH:
                if state.prev_byte == _SLASH:
                    if not state.in_comment:
                        state.in_line_comment = True
                elif state.prev_byte == _STAR:
                    if state.in_block_comment:
                        state.in_block_comment = False
            elif b == _STAR:
                if state.prev_byte == _SLASH and not state.in_comment:
                    state.in_block_comment = True
            elif b == _NEWLINE:
                self._end_line()
            elif b in _BLANKS:
                pass
            elif state.in_comment:
                state.line.comment += 1
            else:
                state.line.code += 1

            state.prev_byte = b

    def _end_line(self) -> None:
        state = self.state
        tally = self.tally
        line = state.line

        tally.lines_all += 1
        if line.code > 0:
            tally.lines_code += 1
        if line.comment > 0:
            tally.lines_comment += 1
        if line.code == 0 and line.comment == 0:
            tally.lines_empty += 1
        tally.bytes_all.add(line.total)
        tally.bytes_code.add(line.code)
        tally.bytes_comment.add(line.comment)

        line.number = tally.lines_all
        if self.sink is not None:
            self.sink(self.path, line)

        state.line = LineCounts()
        state.in_line_comment = False

    def finish(self) -> FileStats:
        """Finalize the stream and return the file's statistics."""
        if self.state.line.total > 0:
            self._end_line()

        tally = self.tally
        lines = tally.lines_all
        return FileStats(
            path=self.path,
            lines_all=lines,
            lines_code=tally.lines_code,
            lines_comment=tally.lines_comment,
            lines_empty=tally.lines_empty,
            max_bpl_all=tally.bytes_all.maximum,
            max_bpl_code=tally.bytes_code.maximum,
            max_bpl_comment=tally.bytes_comment.maximum,
            avg_bpl_all=tally.bytes_all.average(lines),
            avg_bpl_code=tally.bytes_code.average(lines),
            avg_bpl_comment=tally.bytes_comment.average(lines),
        )


def classify_bytes(data: bytes, path: str = "", chunk_size: Optional[int] = None) -> FileStats:
    """Classify an in-memory buffer, optionally split into fixed-size chunks."""
    classifier = LineClassifier(path)
    if chunk_size is None:
        classifier.feed(data)
    else:
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        for start in range(0, len(data), chunk_size):
            classifier.feed(data[start : start + chunk_size])
    return classifier.finish()
