"""Parsing of user-entered and imported values.

Everything here is total: invalid input comes back as ``None`` (or raises
``LedgerValidationError`` at the form boundary) instead of leaking NaN into
profit calculations.
"""

import math
from datetime import date, datetime
from functools import reduce
from typing import Optional

from pydantic import ValidationError

from betpro.errors import LedgerValidationError
from betpro.models.schemas import BetDraft, SubGame


DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def parse_decimal(value) -> Optional[float]:
    """Parse a number from user text or a spreadsheet cell.

    Accepts ints, floats and strings using either "." or "," as the decimal
    separator. Returns None for blanks, garbage, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", ".")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_bet_date(value) -> Optional[date]:
    """Parse a calendar date without any timezone shift.

    "2024-03-05" is always March 5th, whatever the host timezone.
    """
    if value is None:
        return None
    # datetime (and pandas Timestamp) before date: datetime is a date subclass
    if isinstance(value, datetime):
        if value != value:  # NaT
            return None
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, float) and math.isnan(value):
        return None

    text = str(value).strip()
    if not text:
        return None

    # "2024-03-05T00:00:00" / "2024-03-05 00:00:00" -> keep the day part only
    if len(text) > 10 and text[4:5] == "-" and text[10] in "T ":
        text = text[:10]

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def combine_odds(odds: list[float]) -> float:
    """Combined odds of a multiple: the product of every leg's odd."""
    return reduce(lambda acc, odd: acc * odd, odds, 1.0)


def build_legs(events: list[str], odds: list) -> list[SubGame]:
    """Pair event descriptions with their odds."""
    if len(events) != len(odds):
        raise LedgerValidationError(
            f"Got {len(events)} events but {len(odds)} odds"
        )

    legs = []
    for event, raw_odd in zip(events, odds):
        odd = parse_decimal(raw_odd)
        if odd is None or odd <= 0:
            raise LedgerValidationError(f"Invalid odd for '{event}': {raw_odd!r}")
        if not event or not event.strip():
            raise LedgerValidationError("Every leg needs an event description")
        legs.append(SubGame(event=event.strip(), odd=odd))
    return legs


def build_draft(
    bet_date,
    bet_type: str,
    stake,
    events: list[str],
    odds: list,
) -> BetDraft:
    """Validate a bet form submission.

    Raises:
        LedgerValidationError: if anything is missing or not a positive number.
    """
    parsed_date = parse_bet_date(bet_date) if bet_date is not None else date.today()
    if parsed_date is None:
        raise LedgerValidationError(f"Invalid date: {bet_date!r}")

    parsed_stake = parse_decimal(stake)
    if parsed_stake is None or parsed_stake <= 0:
        raise LedgerValidationError(f"Stake must be a positive number, got {stake!r}")

    legs = build_legs(events, odds)

    try:
        return BetDraft(
            date=parsed_date,
            type=bet_type or "",
            stake=parsed_stake,
            legs=legs,
        )
    except ValidationError as e:
        raise LedgerValidationError(str(e)) from e
