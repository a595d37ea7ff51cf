"""Output formatters for linestat."""

from .base import NO_DATA, BaseFormatter, format_average
from .json_formatter import JsonFormatter
from .summary_formatter import SummaryFormatter
from .table_formatter import TableFormatter
from .tsv_formatter import TSV_HEADER, TsvFormatter


def get_formatter(name: str, precision: int = 2, **kwargs) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "summary", "tsv", "table", "json"
        precision: Decimal places for averages
        **kwargs: Extra constructor arguments, e.g. ``console`` for "table"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "summary": SummaryFormatter,
        "tsv": TsvFormatter,
        "table": TableFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(precision=precision, **kwargs)


__all__ = [
    "NO_DATA",
    "BaseFormatter",
    "format_average",
    "JsonFormatter",
    "SummaryFormatter",
    "TableFormatter",
    "TsvFormatter",
    "TSV_HEADER",
    "get_formatter",
]
