"""Plain-text batch summary."""

from ..scanning.models import BatchStats
from .base import BaseFormatter, format_average


class SummaryFormatter(BaseFormatter):
    """Files count, then max and average lines per file for each category."""

    def format(self, batch: BatchStats) -> str:
        p = self.precision
        lines = [
            f"Files: {len(batch.files)}",
            f"Max LpF All:     {batch.max_lpf_all}",
            f"Max LpF Code:    {batch.max_lpf_code}",
            f"Max LpF Comment: {batch.max_lpf_comment}",
            f"Max LpF Empty:   {batch.max_lpf_empty}",
            f"Avg LpF All:     {format_average(batch.avg_lpf_all, p)}",
            f"Avg LpF Code:    {format_average(batch.avg_lpf_code, p)}",
            f"Avg LpF Comment: {format_average(batch.avg_lpf_comment, p)}",
            f"Avg LpF Empty:   {format_average(batch.avg_lpf_empty, p)}",
        ]
        return "\n".join(lines) + "\n"
