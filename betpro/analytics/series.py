"""Dense time series of profit for charting.

Every bucket in the window exists even when nothing was bet on it, so the
cumulative bankroll curve is continuous.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Union

from betpro.i18n import month_label
from betpro.models.schemas import Bet, FilterConfig, FilterMode, Language


@dataclass
class SeriesPoint:
    """One bucket of the profit chart."""
    key: str              # "YYYY-MM" (annual) or "YYYY-MM-DD"
    label: str            # short month name or day of month
    profit: float = 0.0
    cumulative_profit: float = 0.0


def _day_range(start: date, end: date) -> list[date]:
    """Every day from start to end inclusive. Empty when start > end."""
    days = []
    current = start
    while current <= end:
        days.append(current)
        if current == end:
            break
        current += timedelta(days=1)
    return days


def _empty_buckets(config: FilterConfig, language: Language) -> dict[str, SeriesPoint]:
    if config.mode == FilterMode.ANNUAL:
        return {
            f"{config.year:04d}-{month:02d}": SeriesPoint(
                key=f"{config.year:04d}-{month:02d}",
                label=month_label(language, month),
            )
            for month in range(1, 13)
        }

    if config.mode == FilterMode.MONTHLY:
        last_day = calendar.monthrange(config.year, config.month)[1]
        start = date(config.year, config.month, 1)
        end = date(config.year, config.month, last_day)
    else:
        start, end = config.start_date, config.end_date

    return {
        day.isoformat(): SeriesPoint(key=day.isoformat(), label=str(day.day))
        for day in _day_range(start, end)
    }


def _bucket_key(bet: Bet, mode: FilterMode) -> str:
    if mode == FilterMode.ANNUAL:
        return f"{bet.date.year:04d}-{bet.date.month:02d}"
    return bet.date.isoformat()


def build_series(
    bets: list[Bet],
    config: FilterConfig,
    language: Union[Language, str] = Language.EN,
) -> list[SeriesPoint]:
    """Build the per-bucket and cumulative profit series.

    Annual windows get 12 monthly buckets, monthly and custom windows one
    bucket per day. Bets outside every bucket are ignored.
    """
    buckets = _empty_buckets(config, Language(language))

    for bet in bets:
        point = buckets.get(_bucket_key(bet, config.mode))
        if point is not None:
            point.profit += bet.profit

    # ISO keys sort chronologically
    points = [buckets[key] for key in sorted(buckets)]

    running = 0.0
    for point in points:
        running += point.profit
        point.cumulative_profit = running

    return points
