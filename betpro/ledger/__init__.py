"""Bet records, profit rules and input parsing."""

from .parsing import build_draft, build_legs, combine_odds, parse_bet_date, parse_decimal
from .profit import compute_profit, matches_formula
from .store import BetStore, new_bet_id

__all__ = [
    "build_draft",
    "build_legs",
    "combine_odds",
    "parse_bet_date",
    "parse_decimal",
    "compute_profit",
    "matches_formula",
    "BetStore",
    "new_bet_id",
]
