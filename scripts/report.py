"""Generate performance report from the bet ledger."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from betpro.analytics import get_dashboard_context
from betpro.db import get_db
from betpro.i18n import format_money
from betpro.ledger import BetStore
from betpro.models.schemas import BetStatus, FilterConfig

console = Console()


def generate_report():
    """Generate and display performance report for the current year."""
    db = get_db()
    bets = BetStore(db).load().list_bets()
    language = db.get_language()
    currency = db.get_currency()

    if not bets:
        console.print("[yellow]No bets recorded yet.[/yellow]")
        console.print("[dim]Add bets with main.py add, or import a spreadsheet with main.py import[/dim]")
        return

    config = FilterConfig.default()
    ctx = get_dashboard_context(bets, config, language)
    summary = ctx["summary"]
    consolidated = ctx["consolidated"]

    # Main metrics panels
    for title, metrics in [(f"{config.year}", summary), ("All Time", consolidated)]:
        wr_color = "green" if metrics.win_rate >= 50 else "red"
        roi_color = "green" if metrics.roi >= 0 else "red"
        pl_color = "green" if metrics.total_profit >= 0 else "red"

        console.print(Panel.fit(
            f"[bold]Bets:[/bold] {metrics.resolved_count + metrics.active_count}\n"
            f"[bold]Record (W-L-V):[/bold] {metrics.record}\n"
            f"[bold]Win Rate:[/bold] [{wr_color}]{metrics.win_rate:.1f}%[/{wr_color}]\n"
            f"[bold]Total P&L:[/bold] [{pl_color}]{format_money(metrics.total_profit, currency)}[/{pl_color}]\n"
            f"[bold]ROI:[/bold] [{roi_color}]{metrics.roi:+.1f}%[/{roi_color}]\n"
            f"[bold]Active:[/bold] {metrics.active_count}",
            title=title,
            border_style="blue",
        ))

    # Monthly breakdown
    month_table = Table(title=f"Monthly Breakdown {config.year}")
    month_table.add_column("Month", style="cyan")
    month_table.add_column("P&L", style="green")
    month_table.add_column("Bankroll", style="white")

    for point in ctx["series"]:
        pl_color = "green" if point.profit >= 0 else "red"
        cum_color = "green" if point.cumulative_profit >= 0 else "red"
        month_table.add_row(
            point.label,
            f"[{pl_color}]{format_money(point.profit, currency)}[/{pl_color}]",
            f"[{cum_color}]{format_money(point.cumulative_profit, currency)}[/{cum_color}]",
        )

    console.print()
    console.print(month_table)

    # Recent bets (last 10, any period)
    recent = sorted(bets, key=lambda b: b.date, reverse=True)[:10]
    recent_table = Table(title="Recent Bets (Last 10)")
    recent_table.add_column("Date", style="dim")
    recent_table.add_column("Event", style="cyan")
    recent_table.add_column("Odds", style="yellow")
    recent_table.add_column("Result", style="magenta")
    recent_table.add_column("P&L", style="cyan")

    for bet in recent:
        result_color = {
            BetStatus.WIN: "green",
            BetStatus.LOSS: "red",
            BetStatus.VOID: "white",
        }.get(bet.status, "yellow")
        pl_color = "green" if bet.profit >= 0 else "red"

        recent_table.add_row(
            bet.date.isoformat(),
            bet.match,
            f"{bet.odds:.2f}",
            f"[{result_color}]{bet.status.value}[/{result_color}]",
            f"[{pl_color}]{format_money(bet.profit, currency)}[/{pl_color}]",
        )

    console.print()
    console.print(recent_table)

    if consolidated.active_count:
        console.print(f"\n[dim]Pending bets awaiting results: {consolidated.active_count}[/dim]")


if __name__ == "__main__":
    generate_report()
