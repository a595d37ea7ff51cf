"""Data models for the scanning layer.

Vocabulary:
    - All: every line
    - Code: lines holding at least one code byte
    - Comment: lines holding at least one comment byte
    - Empty: lines holding neither code nor comment bytes
    - Bpl: "bytes per line"
    - Lpf: "lines per file"

A line may be both a code line and a comment line, so ``lines_code +
lines_comment`` can exceed ``lines_all``. Empty lines are disjoint from both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions import ScanError
from ..math.reductions import column_maxima, column_means


@dataclass(frozen=True)
class FileStats:
    """Aggregated line statistics of a single file.

    Averages are ``None`` when the file has no lines. A file that failed to
    scan carries only ``path`` and ``error``; every counter stays at zero.
    """

    path: str
    error: Optional[ScanError] = None
    lines_all: int = 0
    lines_code: int = 0
    lines_comment: int = 0
    lines_empty: int = 0
    max_bpl_all: int = 0
    max_bpl_code: int = 0
    max_bpl_comment: int = 0
    avg_bpl_all: Optional[float] = None
    avg_bpl_code: Optional[float] = None
    avg_bpl_comment: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        """String form of the scan error, or the empty string."""
        return "" if self.error is None else str(self.error)

    def line_counts(self) -> tuple[int, int, int, int]:
        return (self.lines_all, self.lines_code, self.lines_comment, self.lines_empty)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "error": self.error_message or None,
            "lines_all": self.lines_all,
            "lines_code": self.lines_code,
            "lines_comment": self.lines_comment,
            "lines_empty": self.lines_empty,
            "max_bpl_all": self.max_bpl_all,
            "max_bpl_code": self.max_bpl_code,
            "max_bpl_comment": self.max_bpl_comment,
            "avg_bpl_all": self.avg_bpl_all,
            "avg_bpl_code": self.avg_bpl_code,
            "avg_bpl_comment": self.avg_bpl_comment,
        }


@dataclass
class BatchStats:
    """Aggregated statistics over a batch of files.

    ``files`` keeps input order and includes failed files. Cross-file
    reductions only consider files that scanned without error; with no such
    file the maxima are 0 and the averages are ``None``.
    """

    files: list[FileStats] = field(default_factory=list)
    max_lpf_all: int = 0
    max_lpf_code: int = 0
    max_lpf_comment: int = 0
    max_lpf_empty: int = 0
    avg_lpf_all: Optional[float] = None
    avg_lpf_code: Optional[float] = None
    avg_lpf_comment: Optional[float] = None
    avg_lpf_empty: Optional[float] = None

    @classmethod
    def from_files(cls, files: list[FileStats]) -> BatchStats:
        """Fold finalized file stats into batch stats."""
        rows = [fst.line_counts() for fst in files if fst.ok]
        maxima = column_maxima(rows, width=4)
        means = column_means(rows, width=4)
        if means is None:
            means = [None] * 4
        return cls(
            files=list(files),
            max_lpf_all=maxima[0],
            max_lpf_code=maxima[1],
            max_lpf_comment=maxima[2],
            max_lpf_empty=maxima[3],
            avg_lpf_all=means[0],
            avg_lpf_code=means[1],
            avg_lpf_comment=means[2],
            avg_lpf_empty=means[3],
        )

    @property
    def valid_files(self) -> list[FileStats]:
        return [fst for fst in self.files if fst.ok]

    @property
    def failed_files(self) -> list[FileStats]:
        return [fst for fst in self.files if not fst.ok]

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": len(self.files),
            "valid_files": len(self.valid_files),
            "failed_files": len(self.failed_files),
            "max_lpf_all": self.max_lpf_all,
            "max_lpf_code": self.max_lpf_code,
            "max_lpf_comment": self.max_lpf_comment,
            "max_lpf_empty": self.max_lpf_empty,
            "avg_lpf_all": self.avg_lpf_all,
            "avg_lpf_code": self.avg_lpf_code,
            "avg_lpf_comment": self.avg_lpf_comment,
            "avg_lpf_empty": self.avg_lpf_empty,
            "details": [fst.to_dict() for fst in self.files],
        }
