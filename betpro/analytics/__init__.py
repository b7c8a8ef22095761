"""Filtering, bucketing and summary metrics over the bet collection."""

from .dashboard import get_dashboard_context
from .filters import filter_bets, in_window
from .series import SeriesPoint, build_series
from .summary import Summary, compute_summary, consolidated_balance

__all__ = [
    "get_dashboard_context",
    "filter_bets",
    "in_window",
    "SeriesPoint",
    "build_series",
    "Summary",
    "compute_summary",
    "consolidated_balance",
]
