"""Scan command: classify files and print batch statistics."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..exceptions import ConfigurationError, InvocationError, OutputWriteError, UsageError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..scanning import LoggingLineSink, scan_batch
from . import app
from ._common import USAGE, console, resolve_config, tsv_destination


@app.command()
def main(
    files: Optional[List[str]] = typer.Argument(
        None,
        help="Source files to scan",
        show_default=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-debug",
        help="Write per-line diagnostics to stderr",
    ),
    tsv: Optional[str] = typer.Option(
        None,
        "--tsv",
        "-tsv",
        metavar="PATH",
        help="Write per-file details as TSV to PATH ('-' for stdout)",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        help="Print a table of per-file statistics",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the batch as JSON instead of the text summary",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        help="Bytes requested per read",
        min=1,
        hidden=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Files scanned in parallel (default: 1)",
        min=1,
        max=32,
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file",
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Classify every line of each FILE as code, comment or empty and print
    per-batch statistics.

    [bold cyan]Examples:[/bold cyan]

      linestat main.go util.go

      linestat -tsv details.tsv src/*.c

      linestat --details --debug lib.js
    """
    if version:
        console.print(f"[bold cyan]linestat[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        if not files:
            raise UsageError(USAGE)
        settings = resolve_config(
            config=config,
            debug=debug,
            tsv=tsv,
            chunk_size=chunk_size,
            workers=workers,
        )
        logger = setup_logging(debug=settings.debug, log_file=log_file)
    except UsageError as e:
        console.print(escape(e.message))
        raise typer.Exit(e.exit_code)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except InvocationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)

    sink = LoggingLineSink() if settings.debug else None
    precision = settings.average_precision

    try:
        with tsv_destination(settings.tsv_path) as tsv_stream:
            batch = scan_batch(
                files,
                chunk_size=settings.chunk_size,
                sink=sink,
                workers=settings.workers,
            )

            if tsv_stream is not None:
                try:
                    get_formatter("tsv", precision).write(batch, tsv_stream)
                    tsv_stream.flush()
                except OSError as e:
                    raise OutputWriteError(settings.tsv_path, e.strerror or str(e))

        if details:
            get_formatter("table", precision, console=console).render(batch)

        get_formatter("json" if json_output else "summary", precision).render(batch)

    except InvocationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)
