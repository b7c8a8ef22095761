"""Localized labels and formatting."""

from .locales import (
    CURRENCY_SYMBOLS,
    MONTH_NAMES,
    TRANSLATIONS,
    format_money,
    month_label,
    translate,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "MONTH_NAMES",
    "TRANSLATIONS",
    "format_money",
    "month_label",
    "translate",
]
