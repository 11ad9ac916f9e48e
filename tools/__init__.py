"""Deterministic computation tools — re-exports from tools.stats_tools."""

from __future__ import annotations

from tools.stats_tools import (  # noqa: F401
    HISTOGRAM_BIN_COUNT,
    UNGROUPED,
    compute_summary,
    grouped_summary,
    normal_curve,
    normal_pdf,
)

__all__ = [
    "HISTOGRAM_BIN_COUNT",
    "UNGROUPED",
    "compute_summary",
    "grouped_summary",
    "normal_curve",
    "normal_pdf",
]
