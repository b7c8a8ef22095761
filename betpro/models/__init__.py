"""Pydantic models for data structures."""

from .schemas import (
    BetStatus,
    FilterMode,
    Language,
    Currency,
    Theme,
    SubGame,
    Bet,
    BetDraft,
    FilterConfig,
)

__all__ = [
    "BetStatus",
    "FilterMode",
    "Language",
    "Currency",
    "Theme",
    "SubGame",
    "Bet",
    "BetDraft",
    "FilterConfig",
]
