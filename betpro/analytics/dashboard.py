"""Everything the presentation layer needs for one view."""

from typing import Union

from betpro.analytics.filters import filter_bets
from betpro.analytics.series import build_series
from betpro.analytics.summary import compute_summary
from betpro.models.schemas import Bet, FilterConfig, Language


def get_dashboard_context(
    bets: list[Bet],
    config: FilterConfig,
    language: Union[Language, str] = Language.EN,
) -> dict:
    """Filtered bets, chart series and period/consolidated summaries."""
    filtered = filter_bets(bets, config)
    period = compute_summary(filtered)
    consolidated = compute_summary(bets)

    return {
        "filter": config,
        "bets": filtered,
        "series": build_series(filtered, config, language),
        "summary": period,
        "consolidated": consolidated,
        "period_balance": period.total_profit,
        "consolidated_balance": consolidated.total_profit,
    }
