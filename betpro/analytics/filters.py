"""Selection of the bets that fall inside a reporting window."""

from betpro.models.schemas import Bet, FilterConfig, FilterMode


def in_window(bet: Bet, config: FilterConfig) -> bool:
    """Check whether a bet's calendar date falls inside the window."""
    if config.mode == FilterMode.ANNUAL:
        return bet.date.year == config.year
    if config.mode == FilterMode.MONTHLY:
        return bet.date.year == config.year and bet.date.month == config.month
    # Custom: both endpoints inclusive, whole days
    return config.start_date <= bet.date <= config.end_date


def filter_bets(bets: list[Bet], config: FilterConfig) -> list[Bet]:
    """Bets inside the window, most recent date first.

    The sort is stable, so bets sharing a date keep their collection order.
    """
    selected = [bet for bet in bets if in_window(bet, config)]
    return sorted(selected, key=lambda bet: bet.date, reverse=True)
