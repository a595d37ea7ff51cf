"""Numeric reductions used by the batch aggregator."""

from .reductions import column_maxima, column_means

__all__ = ["column_maxima", "column_means"]
