"""Rich terminal table of per-file stats."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..scanning.models import BatchStats
from .base import BaseFormatter, format_average


class TableFormatter(BaseFormatter):
    """Per-file table; failed files show their error in place of counts."""

    def __init__(self, precision: int = 2, console: Optional[Console] = None):
        super().__init__(precision)
        self.console = console or Console()

    def build_table(self, batch: BatchStats) -> Table:
        table = Table(title="Line statistics", show_lines=False)
        table.add_column("Path", style="cyan", overflow="fold")
        for name in ("All", "Code", "Comment", "Empty"):
            table.add_column(name, justify="right")
        table.add_column("Max Bpl", justify="right")
        table.add_column("Avg Bpl", justify="right")

        for fst in batch.files:
            if not fst.ok:
                table.add_row(
                    escape(fst.path), f"[red]{escape(fst.error_message)}[/red]", "", "", "", "", ""
                )
                continue
            table.add_row(
                escape(fst.path),
                str(fst.lines_all),
                str(fst.lines_code),
                str(fst.lines_comment),
                str(fst.lines_empty),
                str(fst.max_bpl_all),
                format_average(fst.avg_bpl_all, self.precision),
            )
        return table

    def render(self, batch: BatchStats) -> None:
        self.console.print(self.build_table(batch))

    def format(self, batch: BatchStats) -> str:
        with self.console.capture() as capture:
            self.render(batch)
        return capture.get()
