"""TSV formatter: one row per file, failed files included."""

import csv
import io
from typing import TextIO

from ..scanning.models import BatchStats, FileStats
from .base import BaseFormatter, format_average

TSV_HEADER = [
    "Path", "Error",
    "LinesAll", "LinesCode", "LinesComment", "LinesEmpty",
    "MaxBplAll", "MaxBplCode", "MaxBplComment",
    "AvgBplAll", "AvgBplCode", "AvgBplComment",
]

_FIELD_BREAKS = str.maketrans({"\t": " ", "\r": " ", "\n": " "})


def _clean(text: str) -> str:
    """Replace tabs and line breaks so a field never splits its row."""
    return text.translate(_FIELD_BREAKS)


class TsvFormatter(BaseFormatter):
    """Render per-file details as tab-separated values.

    Fields are written verbatim with no quoting: a path containing a
    double quote appears exactly as given. Tabs and line breaks inside
    the path or error text are replaced with a space.
    """

    def _row(self, fst: FileStats) -> list[str]:
        return [
            _clean(fst.path), _clean(fst.error_message),
            str(fst.lines_all), str(fst.lines_code), str(fst.lines_comment), str(fst.lines_empty),
            str(fst.max_bpl_all), str(fst.max_bpl_code), str(fst.max_bpl_comment),
            format_average(fst.avg_bpl_all, self.precision),
            format_average(fst.avg_bpl_code, self.precision),
            format_average(fst.avg_bpl_comment, self.precision),
        ]

    def write(self, batch: BatchStats, stream: TextIO) -> None:
        writer = csv.writer(
            stream,
            delimiter="\t",
            lineterminator="\n",
            quoting=csv.QUOTE_NONE,
            quotechar=None,
        )
        writer.writerow(TSV_HEADER)
        for fst in batch.files:
            writer.writerow(self._row(fst))

    def format(self, batch: BatchStats) -> str:
        output = io.StringIO()
        self.write(batch, output)
        return output.getvalue()
