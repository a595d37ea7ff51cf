"""Shared CLI helpers."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console

from ..config import ScanConfig, load_config
from ..exceptions import OutputWriteError

console = Console(highlight=False, soft_wrap=True)

USAGE = "USAGE: linestat [-debug] [-tsv PATH] FILE [FILE...]"


def resolve_config(
    config: Optional[Path] = None,
    debug: bool = False,
    tsv: Optional[str] = None,
    chunk_size: Optional[int] = None,
    workers: Optional[int] = None,
) -> ScanConfig:
    """Build the run configuration from CLI options."""
    overrides = {
        "tsv_path": tsv,
        "chunk_size": chunk_size,
        "workers": workers,
    }
    if debug:
        overrides["debug"] = True
    return load_config(config_file=config, **overrides)


@contextmanager
def tsv_destination(path: Optional[str]) -> Iterator[Optional[TextIO]]:
    """Open the TSV destination; ``-`` means stdout and None means no TSV.

    Raises:
        OutputWriteError: If the destination file cannot be created
    """
    if path is None:
        yield None
        return
    if path == "-":
        yield sys.stdout
        return

    try:
        handle = open(path, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e))
    with handle:
        yield handle
