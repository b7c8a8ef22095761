"""Profit calculation from stake, odds and status."""

from betpro.models.schemas import Bet, BetStatus


def compute_profit(stake: float, odds: float, status: BetStatus) -> float:
    """Realized profit of a bet.

    Pending and void bets are worth 0, a loss costs the stake and a win
    returns stake * odds minus the stake.
    """
    status = BetStatus(status)
    if status == BetStatus.WIN:
        return stake * odds - stake
    if status == BetStatus.LOSS:
        return -stake
    return 0.0


def matches_formula(bet: Bet, tolerance: float = 1e-9) -> bool:
    """True when the stored profit is consistent with the bet's status.

    Win bets always pass, since a cashout may replace their payout.
    """
    if bet.status == BetStatus.WIN:
        return True
    return abs(bet.profit - compute_profit(bet.stake, bet.odds, bet.status)) <= tolerance
