"""Utility functions."""

from .export import (
    COLUMNS,
    ImportResult,
    bets_to_dataframe,
    export_bets,
    import_bets,
    row_to_bet,
)

__all__ = [
    "COLUMNS",
    "ImportResult",
    "bets_to_dataframe",
    "export_bets",
    "import_bets",
    "row_to_bet",
]
