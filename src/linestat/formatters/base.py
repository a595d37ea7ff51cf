"""Base formatter interface for linestat output rendering."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from ..scanning.models import BatchStats

NO_DATA = "n/a"


def format_average(value: Optional[float], precision: int = 2) -> str:
    """Fixed-point average, or ``n/a`` when there is nothing to average."""
    if value is None:
        return NO_DATA
    return f"{value:.{precision}f}"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, precision: int = 2):
        self.precision = precision

    def write(self, batch: BatchStats, stream: TextIO) -> None:
        """Write the formatted batch to an open text stream."""
        stream.write(self.format(batch))

    def render(self, batch: BatchStats) -> None:
        """Print the formatted batch to stdout."""
        self.write(batch, sys.stdout)

    @abstractmethod
    def format(self, batch: BatchStats) -> str:
        """Return formatted string representation of the batch."""
