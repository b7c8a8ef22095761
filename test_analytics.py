"""Tests for filtering, bucketing and summary metrics."""

from datetime import date

import pytest
from pydantic import ValidationError

from betpro.analytics import (
    build_series,
    compute_summary,
    consolidated_balance,
    filter_bets,
    get_dashboard_context,
)
from betpro.ledger import compute_profit, new_bet_id
from betpro.models.schemas import Bet, BetStatus, FilterConfig, FilterMode, Language


def make_bet(day: date, stake: float = 10.0, odds: float = 2.0, status: BetStatus = BetStatus.PENDING) -> Bet:
    return Bet(
        id=new_bet_id(),
        date=day,
        match=f"Match {day.isoformat()}",
        type="Single",
        odds=odds,
        stake=stake,
        status=status,
        profit=compute_profit(stake, odds, status),
    )


def annual(year: int) -> FilterConfig:
    return FilterConfig(mode=FilterMode.ANNUAL, year=year, month=1,
                        start_date=date(year, 1, 1), end_date=date(year, 12, 31))


def monthly(year: int, month: int) -> FilterConfig:
    return FilterConfig(mode=FilterMode.MONTHLY, year=year, month=month,
                        start_date=date(year, month, 1), end_date=date(year, month, 1))


def custom(start: date, end: date) -> FilterConfig:
    return FilterConfig(mode=FilterMode.CUSTOM, year=start.year, month=start.month,
                        start_date=start, end_date=end)


SAMPLE = [
    make_bet(date(2024, 1, 15), status=BetStatus.WIN),
    make_bet(date(2024, 3, 5), stake=20, status=BetStatus.LOSS),
    make_bet(date(2024, 3, 31), stake=5, odds=3.0, status=BetStatus.WIN),
    make_bet(date(2023, 12, 31), status=BetStatus.WIN),
    make_bet(date(2024, 4, 1)),
]


# ===== Filter engine =====

def test_annual_filter():
    result = filter_bets(SAMPLE, annual(2024))
    assert len(result) == 4
    assert all(b.date.year == 2024 for b in result)


def test_monthly_filter():
    result = filter_bets(SAMPLE, monthly(2024, 3))
    assert [b.date for b in result] == [date(2024, 3, 31), date(2024, 3, 5)]


def test_custom_filter_includes_both_endpoints():
    result = filter_bets(SAMPLE, custom(date(2024, 3, 5), date(2024, 4, 1)))
    assert [b.date for b in result] == [date(2024, 4, 1), date(2024, 3, 31), date(2024, 3, 5)]


def test_custom_filter_reversed_range_is_empty():
    assert filter_bets(SAMPLE, custom(date(2024, 4, 1), date(2024, 3, 1))) == []


def test_filter_sorts_most_recent_first():
    shuffled = [SAMPLE[2], SAMPLE[0], SAMPLE[4], SAMPLE[1]]
    result = filter_bets(shuffled, annual(2024))
    dates = [b.date for b in result]
    assert dates == sorted(dates, reverse=True)


def test_filter_is_idempotent():
    config = monthly(2024, 3)
    once = filter_bets(SAMPLE, config)
    assert filter_bets(once, config) == once


# ===== Aggregation & bucketing =====

def test_annual_series_has_twelve_labeled_buckets():
    series = build_series(filter_bets(SAMPLE, annual(2024)), annual(2024), Language.EN)

    assert len(series) == 12
    assert [p.label for p in series] == [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ]
    assert series[0].profit == 10.0
    assert series[2].profit == -10.0      # -20 loss + 10 win
    assert series[3].profit == 0.0        # pending
    assert series[-1].cumulative_profit == 0.0


def test_annual_series_uses_language():
    series = build_series([], annual(2024), Language.PT)
    assert series[1].label == "fev."


def test_empty_year_is_flat_at_zero():
    series = build_series([], annual(2030))
    assert len(series) == 12
    assert all(p.profit == 0 and p.cumulative_profit == 0 for p in series)


def test_monthly_series_has_every_day():
    config = monthly(2024, 2)
    series = build_series(filter_bets(SAMPLE, config), config)
    assert len(series) == 29
    assert series[0].label == "1"
    assert series[-1].label == "29"
    assert series[0].key == "2024-02-01"


def test_custom_series_is_dense_and_ordered():
    config = custom(date(2024, 3, 30), date(2024, 4, 2))
    series = build_series(filter_bets(SAMPLE, config), config)

    assert [p.key for p in series] == ["2024-03-30", "2024-03-31", "2024-04-01", "2024-04-02"]
    assert [p.label for p in series] == ["30", "31", "1", "2"]
    assert series[1].profit == 10.0
    assert [p.cumulative_profit for p in series] == [0.0, 10.0, 10.0, 10.0]


def test_custom_reversed_range_has_no_buckets():
    assert build_series(SAMPLE, custom(date(2024, 4, 1), date(2024, 3, 1))) == []


def test_custom_range_up_to_last_calendar_day():
    series = build_series([], custom(date(9999, 12, 30), date(9999, 12, 31)))
    assert [p.key for p in series] == ["9999-12-30", "9999-12-31"]
    assert filter_bets([make_bet(date(9999, 12, 31))], custom(date(9999, 12, 30), date.max))


def test_filter_year_must_be_a_calendar_year():
    with pytest.raises(ValidationError):
        FilterConfig(mode=FilterMode.MONTHLY, year=10000, month=1,
                     start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))
    with pytest.raises(ValidationError):
        FilterConfig(mode=FilterMode.ANNUAL, year=0, month=1,
                     start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))
    assert len(build_series([], monthly(9999, 12))) == 31


def test_cumulative_is_running_sum_and_matches_summary():
    config = annual(2024)
    filtered = filter_bets(SAMPLE, config)
    series = build_series(filtered, config)

    running = 0.0
    for point in series:
        running += point.profit
        assert abs(point.cumulative_profit - running) < 1e-9
    assert abs(series[-1].cumulative_profit - compute_summary(filtered).total_profit) < 1e-9


# ===== Summary metrics =====

def test_summary_counts():
    summary = compute_summary(filter_bets(SAMPLE, annual(2024)))

    assert summary.total_profit == 0.0
    assert summary.total_stake == 45.0
    assert summary.resolved_count == 3
    assert summary.wins == 2
    assert summary.losses == 1
    assert summary.active_count == 1
    assert abs(summary.win_rate - 200 / 3) < 1e-9


def test_void_lowers_win_rate():
    bets = [
        make_bet(date(2024, 5, 1), status=BetStatus.WIN),
        make_bet(date(2024, 5, 2), status=BetStatus.VOID),
    ]
    summary = compute_summary(bets)
    assert summary.resolved_count == 2
    assert summary.voids == 1
    assert summary.win_rate == 50.0


def test_summary_without_stake_or_resolved_bets():
    summary = compute_summary([])
    assert summary.roi == 0
    assert summary.win_rate == 0
    assert summary.total_profit == 0

    pending_only = compute_summary([make_bet(date(2024, 5, 1))])
    assert pending_only.win_rate == 0
    assert pending_only.active_count == 1


def test_scenario_single_win():
    """Stake 10 at 2.0 won this year: +10, 100% ROI, 100% win rate."""
    today = date.today()
    bets = [make_bet(today, stake=10, odds=2.0, status=BetStatus.WIN)]
    summary = compute_summary(filter_bets(bets, FilterConfig.default(today)))

    assert summary.total_profit == 10.0
    assert summary.roi == 100.0
    assert summary.win_rate == 100.0
    assert summary.active_count == 0


def test_scenario_loss_and_pending():
    today = date.today()
    bets = [
        make_bet(today, stake=50, odds=1.5, status=BetStatus.LOSS),
        make_bet(today, stake=50, odds=3.0, status=BetStatus.PENDING),
    ]
    summary = compute_summary(filter_bets(bets, FilterConfig.default(today)))

    assert summary.total_profit == -50.0
    assert summary.active_count == 1
    assert summary.win_rate == 0.0
    assert summary.roi == -50.0


def test_dashboard_context_period_vs_consolidated():
    ctx = get_dashboard_context(SAMPLE, monthly(2024, 3), Language.EN)

    assert len(ctx["bets"]) == 2
    assert len(ctx["series"]) == 31
    assert ctx["period_balance"] == -10.0
    assert ctx["consolidated_balance"] == consolidated_balance(SAMPLE) == 10.0
    assert ctx["consolidated"].active_count == 1


def test_default_filter():
    config = FilterConfig.default(date(2024, 6, 18))
    assert config.mode == FilterMode.ANNUAL
    assert config.year == 2024
    assert config.month == 6
    assert config.start_date == date(2024, 6, 1)
    assert config.end_date == date(2024, 6, 18)


if __name__ == "__main__":
    print("=" * 50)
    print("BetPro Analytics Test Suite")
    print("=" * 50)

    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            func()
            print(f"[OK] {name}")

    print("\n" + "=" * 50)
    print("All tests PASSED!")
    print("=" * 50)
