"""Totals, ROI and win rate over a set of bets."""

from dataclasses import dataclass

from betpro.models.schemas import Bet, BetStatus


@dataclass
class Summary:
    """Aggregate metrics for a set of bets."""
    total_profit: float = 0.0
    total_stake: float = 0.0
    win_rate: float = 0.0       # percent of resolved bets that won
    roi: float = 0.0            # percent of stake
    active_count: int = 0       # pending bets

    # Counts
    resolved_count: int = 0
    wins: int = 0
    losses: int = 0
    voids: int = 0

    @property
    def record(self) -> str:
        """Return W-L-V record string."""
        return f"{self.wins}-{self.losses}-{self.voids}"


def compute_summary(bets: list[Bet]) -> Summary:
    """Compute summary metrics.

    Void bets count as resolved but never as wins, so they lower the win
    rate. Pending bets add their stake to the ROI denominator.
    """
    summary = Summary()

    for bet in bets:
        summary.total_profit += bet.profit
        summary.total_stake += bet.stake

        if not bet.status.is_resolved:
            summary.active_count += 1
            continue

        summary.resolved_count += 1
        if bet.status == BetStatus.WIN:
            summary.wins += 1
        elif bet.status == BetStatus.LOSS:
            summary.losses += 1
        else:
            summary.voids += 1

    if summary.resolved_count > 0:
        summary.win_rate = summary.wins / summary.resolved_count * 100
    if summary.total_stake > 0:
        summary.roi = summary.total_profit / summary.total_stake * 100

    return summary


def consolidated_balance(bets: list[Bet]) -> float:
    """All-time profit across the whole, unfiltered collection."""
    return compute_summary(bets).total_profit
