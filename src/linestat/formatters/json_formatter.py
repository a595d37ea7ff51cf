"""JSON formatter for linestat."""

import json
from typing import Any

from ..scanning.models import BatchStats
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the batch summary and every file's stats as JSON.

    Averages (``avg_*`` keys) are rounded to the formatter's precision;
    missing averages stay ``null``.
    """

    def _round_averages(self, data: dict[str, Any]) -> dict[str, Any]:
        rounded = {}
        for key, value in data.items():
            if key.startswith("avg_") and isinstance(value, float):
                value = round(value, self.precision)
            elif isinstance(value, list):
                value = [self._round_averages(v) if isinstance(v, dict) else v for v in value]
            rounded[key] = value
        return rounded

    def format(self, batch: BatchStats) -> str:
        return json.dumps(self._round_averages(batch.to_dict()), indent=2) + "\n"
