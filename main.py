"""BetPro ledger - command line entry point."""

import argparse
import asyncio
import sys
from typing import Optional
from datetime import date

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from betpro.agents import InsightsAgent
from betpro.analytics import SeriesPoint, Summary, get_dashboard_context
from betpro.auth import UserRegistry
from betpro.db import get_db
from betpro.errors import LedgerError
from betpro.i18n import format_money, translate
from betpro.ledger import BetStore, build_draft, parse_bet_date
from betpro.models.schemas import Bet, BetStatus, Currency, FilterConfig, FilterMode, Language, Theme
from betpro.utils import export_bets, import_bets


console = Console()

STATUS_COLORS = {
    BetStatus.PENDING: "yellow",
    BetStatus.WIN: "green",
    BetStatus.LOSS: "red",
    BetStatus.VOID: "dim",
}


def money_markup(value: float, currency: Currency) -> str:
    """Currency amount colored by sign."""
    color = "green" if value > 0 else ("red" if value < 0 else "white")
    return f"[{color}]{format_money(value, currency)}[/{color}]"


def build_filter(args: argparse.Namespace) -> FilterConfig:
    """Filter config from the defaults plus any command line overrides."""
    config = FilterConfig.default()
    updates = {}
    if getattr(args, "mode", None):
        updates["mode"] = FilterMode(args.mode)
    if getattr(args, "year", None):
        updates["year"] = args.year
    if getattr(args, "month", None):
        updates["month"] = args.month
    if getattr(args, "start", None):
        updates["start_date"] = parse_bet_date(args.start)
    if getattr(args, "end", None):
        updates["end_date"] = parse_bet_date(args.end)
    if None in updates.values():
        raise LedgerError("Dates must look like YYYY-MM-DD")
    try:
        return FilterConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise LedgerError(f"Invalid filter: {e}") from e


def display_bets(bets: list[Bet], currency: Currency, title: str = "Bets"):
    """Display bets in a formatted table."""
    table = Table(title=f"{title} ({len(bets)})")

    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Event", style="white")
    table.add_column("Type", style="blue")
    table.add_column("Odds", style="yellow", justify="right")
    table.add_column("Stake", justify="right")
    table.add_column("Status", style="magenta")
    table.add_column("Profit", justify="right")

    for bet in bets:
        color = STATUS_COLORS[bet.status]
        event = bet.match
        if bet.sub_games:
            legs = "; ".join(f"{g.event} @ {g.odd:.2f}" for g in bet.sub_games)
            event = f"{bet.match}\n[dim]{legs}[/dim]"
        profit = "--" if bet.status == BetStatus.PENDING else money_markup(bet.profit, currency)

        table.add_row(
            bet.id,
            bet.date.isoformat(),
            event,
            bet.type,
            f"{bet.odds:.2f}",
            format_money(bet.stake, currency),
            f"[{color}]{bet.status.value}[/{color}]",
            profit,
        )

    console.print(table)


def display_summary(summary: Summary, consolidated: Summary, currency: Currency):
    """Period and consolidated balance panels."""
    roi_color = "green" if summary.roi >= 0 else "red"
    wr_color = "green" if summary.win_rate >= 50 else "red"

    console.print(Panel.fit(
        f"[bold]Period Result:[/bold] {money_markup(summary.total_profit, currency)}\n"
        f"[bold]Consolidated Result:[/bold] {money_markup(consolidated.total_profit, currency)}\n"
        f"[bold]Total Staked:[/bold] {format_money(summary.total_stake, currency)}\n"
        f"[bold]ROI:[/bold] [{roi_color}]{summary.roi:+.1f}%[/{roi_color}]\n"
        f"[bold]Win Rate:[/bold] [{wr_color}]{summary.win_rate:.1f}%[/{wr_color}] ({summary.record})\n"
        f"[bold]Active Bets:[/bold] {summary.active_count}",
        title="Performance",
        border_style="blue",
    ))


def display_series(series: list[SeriesPoint], currency: Currency):
    """Bucket profit and bankroll evolution."""
    table = Table(title="Bankroll Evolution")
    table.add_column("Period", style="cyan")
    table.add_column("Profit", justify="right")
    table.add_column("Cumulative", justify="right")

    for point in series:
        table.add_row(
            point.label,
            money_markup(point.profit, currency),
            money_markup(point.cumulative_profit, currency),
        )

    console.print(table)


# ============== COMMANDS ==============

def cmd_add(args, store: BetStore, language: Language, currency: Currency):
    draft = build_draft(args.date, args.type, args.stake, args.event or [], args.odd or [])
    bet = store.add(draft, status=BetStatus(args.status.upper()),
                    multiple_label=translate(language, "multiple"))
    console.print(f"[green]Saved bet {bet.id}[/green] {bet.match} @ {bet.odds:.2f}")


def edit_draft(args: argparse.Namespace, current: Bet):
    """Draft for a full edit; omitted options keep the stored values."""
    if current.sub_games:
        events = [leg.event for leg in current.sub_games]
        odds = [leg.odd for leg in current.sub_games]
    else:
        events, odds = [current.match], [current.odds]

    return build_draft(
        args.date if args.date is not None else current.date,
        args.type if args.type is not None else current.type,
        args.stake if args.stake is not None else current.stake,
        args.event if args.event is not None else events,
        args.odd if args.odd is not None else odds,
    )


def cmd_edit(args, store: BetStore, language: Language, currency: Currency):
    current = store.get(args.id)
    if current is None:
        console.print(f"[dim]Bet {args.id} not found[/dim]")
        return
    draft = edit_draft(args, current)
    bet = store.update(args.id, draft, multiple_label=translate(language, "multiple"))
    if bet is None:
        console.print(f"[dim]Bet {args.id} not found[/dim]")
        return
    console.print(f"[green]Updated bet {bet.id}[/green] {bet.match} @ {bet.odds:.2f}")


def cmd_status(args, store: BetStore, language: Language, currency: Currency):
    bet = store.set_status(args.id, BetStatus(args.status.upper()))
    if bet is None:
        console.print(f"[dim]Bet {args.id} not found[/dim]")
        return
    console.print(f"{bet.match}: [{STATUS_COLORS[bet.status]}]{bet.status.value}[/] "
                  f"{money_markup(bet.profit, currency)}")


def cmd_cashout(args, store: BetStore, language: Language, currency: Currency):
    bet = store.override_profit(args.id, args.profit)
    if bet is None:
        console.print(f"[dim]Bet {args.id} not found[/dim]")
        return
    console.print(f"{bet.match}: profit set to {money_markup(bet.profit, currency)}")


def cmd_delete(args, store: BetStore, language: Language, currency: Currency):
    if store.delete(args.id):
        console.print(f"[yellow]Deleted bet {args.id}[/yellow]")
    else:
        console.print(f"[dim]Bet {args.id} not found[/dim]")


def cmd_list(args, store: BetStore, language: Language, currency: Currency):
    ctx = get_dashboard_context(store.list_bets(), build_filter(args), language)
    display_bets(ctx["bets"], currency, title="History")


def cmd_report(args, store: BetStore, language: Language, currency: Currency):
    ctx = get_dashboard_context(store.list_bets(), build_filter(args), language)
    display_summary(ctx["summary"], ctx["consolidated"], currency)
    console.print()
    display_series(ctx["series"], currency)


def cmd_export(args, store: BetStore, language: Language, currency: Currency):
    settings = get_settings()
    path = export_bets(
        store.list_bets(),
        output_dir=args.output_dir or settings.export_dir,
        fmt=args.format or settings.export_format,
    )
    console.print(f"[green]Bets exported to: {path}[/green]")


def cmd_import(args, store: BetStore, language: Language, currency: Currency):
    try:
        result = import_bets(args.file)
    except LedgerError as e:
        console.print(f"[red]{translate(language, 'import_error')}[/red] [dim]{e}[/dim]")
        return
    count = store.import_bets(result.bets)
    console.print(f"[green]{translate(language, 'import_success')}[/green] ({count})")
    if result.skipped:
        console.print(f"[dim]Skipped {result.skipped} row(s) with an invalid date[/dim]")


def cmd_insights(args, store: BetStore, language: Language, currency: Currency):
    ctx = get_dashboard_context(store.list_bets(), build_filter(args), language)
    if not ctx["bets"]:
        console.print("[yellow]No bets in this period.[/yellow]")
        return
    console.print("[yellow]Requesting insights...[/yellow]")
    text = asyncio.run(InsightsAgent().generate(ctx["bets"], language, currency))
    console.print(Panel(text or "", title="AI Analysis", border_style="blue"))


def cmd_prefs(args, store: BetStore, language: Language, currency: Currency):
    db = get_db()
    if args.lang:
        db.set_language(args.lang)
    if args.currency:
        db.set_currency(args.currency)
    if args.theme:
        db.set_theme(args.theme)
    console.print(
        f"Language: {db.get_language().value} | "
        f"Currency: {db.get_currency().value} | "
        f"Theme: {db.get_theme().value}"
    )


def cmd_register(args, store: BetStore, language: Language, currency: Currency):
    user = UserRegistry(get_db()).register(args.email, args.name, args.password)
    console.print(f"[green]Welcome, {user.name}![/green]")


def cmd_login(args, store: BetStore, language: Language, currency: Currency):
    user = UserRegistry(get_db()).login(args.email, args.password)
    if user is None:
        console.print("[red]Invalid email or password[/red]")
        return
    console.print(f"[green]Signed in as {user.name}[/green]")


# ============== ARGUMENTS ==============

def add_filter_args(parser: argparse.ArgumentParser):
    parser.add_argument("--mode", choices=[m.value for m in FilterMode])
    parser.add_argument("--year", type=int)
    parser.add_argument("--month", type=int, help="1-12")
    parser.add_argument("--start", help="YYYY-MM-DD")
    parser.add_argument("--end", help="YYYY-MM-DD")


def add_bet_args(parser: argparse.ArgumentParser, editing: bool = False):
    # Edits leave omitted fields as they are
    if editing:
        parser.add_argument("--date")
        parser.add_argument("--type")
        parser.add_argument("--stake")
    else:
        parser.add_argument("--date", default=date.today().isoformat())
        parser.add_argument("--type", default="")
        parser.add_argument("--stake", required=True)
    parser.add_argument("--event", action="append", help="repeat for each leg")
    parser.add_argument("--odd", action="append", help="repeat for each leg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal sports betting ledger")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add", help="record a new bet")
    add_bet_args(p)
    p.add_argument("--status", default="pending",
                   choices=[s.value.lower() for s in BetStatus])
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("edit", help="edit every field of a bet")
    p.add_argument("id")
    add_bet_args(p, editing=True)
    p.set_defaults(func=cmd_edit)

    p = sub.add_parser("status", help="mark a bet as win/loss/void/pending")
    p.add_argument("id")
    p.add_argument("status", choices=[s.value.lower() for s in BetStatus])
    p.set_defaults(func=cmd_status)

    p = sub.add_parser("cashout", help="set a resolved bet's profit manually")
    p.add_argument("id")
    p.add_argument("profit")
    p.set_defaults(func=cmd_cashout)

    p = sub.add_parser("delete", help="delete a bet")
    p.add_argument("id")
    p.set_defaults(func=cmd_delete)

    for name, func in [("list", cmd_list), ("report", cmd_report), ("insights", cmd_insights)]:
        p = sub.add_parser(name)
        add_filter_args(p)
        p.set_defaults(func=func)

    p = sub.add_parser("export", help="export all bets to a spreadsheet")
    p.add_argument("--output-dir")
    p.add_argument("--format", choices=["xlsx", "csv"])
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("import", help="import bets from a spreadsheet")
    p.add_argument("file")
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("prefs", help="show or change display preferences")
    p.add_argument("--lang", choices=[l.value for l in Language])
    p.add_argument("--currency", choices=[c.value for c in Currency])
    p.add_argument("--theme", choices=[t.value for t in Theme])
    p.set_defaults(func=cmd_prefs)

    p = sub.add_parser("register", help="create a local user")
    p.add_argument("--email", required=True)
    p.add_argument("--name", required=True)
    p.add_argument("--password", required=True)
    p.set_defaults(func=cmd_register)

    p = sub.add_parser("login", help="check local user credentials")
    p.add_argument("--email", required=True)
    p.add_argument("--password", required=True)
    p.set_defaults(func=cmd_login)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    db = get_db()
    store = BetStore(db).load()
    language = db.get_language()
    currency = db.get_currency()

    try:
        args.func(args, store, language, currency)
    except LedgerError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
