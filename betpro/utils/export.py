"""Spreadsheet import and export of the bet collection."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from betpro.errors import BetImportError
from betpro.ledger.parsing import parse_bet_date, parse_decimal
from betpro.ledger.store import new_bet_id
from betpro.models.schemas import Bet, BetStatus


COLUMNS = ["Date", "Event", "Type", "Odds", "Stake", "Status", "Profit"]


@dataclass
class ImportResult:
    """Bets read from a spreadsheet."""
    bets: list[Bet] = field(default_factory=list)
    skipped: int = 0


def bets_to_dataframe(bets: list[Bet]) -> pd.DataFrame:
    """One row per bet. Combination legs are not expanded."""
    data = []
    for bet in bets:
        data.append({
            "Date": bet.date.isoformat(),
            "Event": bet.match,
            "Type": bet.type,
            "Odds": bet.odds,
            "Stake": bet.stake,
            "Status": bet.status.value,
            "Profit": bet.profit,
        })
    return pd.DataFrame(data, columns=COLUMNS)


def export_bets(
    bets: list[Bet],
    output_dir: str = "output",
    fmt: str = "xlsx",
) -> Path:
    """Export the bet collection to an .xlsx or .csv file.

    Args:
        bets: Full bet collection
        output_dir: Directory to save the file
        fmt: "xlsx" or "csv"

    Returns:
        Path to the created file
    """
    if fmt not in ("xlsx", "csv"):
        raise ValueError(f"Unsupported export format: {fmt}")

    # Create output directory if it doesn't exist
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    df = bets_to_dataframe(bets)
    filename = output_path / f"betpro_export_{date.today().isoformat()}.{fmt}"

    if fmt == "xlsx":
        df.to_excel(filename, sheet_name="Bets", index=False, engine="openpyxl")
    else:
        df.to_csv(filename, index=False)

    return filename


def _cell(row: dict, column: str):
    """Cell value with pandas blanks (NaN/NaT) mapped to None."""
    value = row.get(column)
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _text(row: dict, column: str, default: str) -> str:
    value = _cell(row, column)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _status(value) -> BetStatus:
    if value is None:
        return BetStatus.PENDING
    try:
        return BetStatus(str(value).strip().upper())
    except ValueError:
        return BetStatus.PENDING


def row_to_bet(row: dict, today: Optional[date] = None) -> Optional[Bet]:
    """Build a bet from one spreadsheet row, or None if its date is unusable.

    Missing or invalid odds default to 1, stake and profit to 0 and status
    to pending. A pending row never carries profit.
    """
    raw_date = _cell(row, "Date")
    if raw_date is None:
        bet_date = today or date.today()
    else:
        bet_date = parse_bet_date(raw_date)
        if bet_date is None:
            return None

    odds = parse_decimal(_cell(row, "Odds"))
    if odds is None or odds <= 0:
        odds = 1.0

    stake = parse_decimal(_cell(row, "Stake"))
    if stake is None or stake < 0:
        stake = 0.0

    status = _status(_cell(row, "Status"))
    profit = parse_decimal(_cell(row, "Profit")) or 0.0
    if status == BetStatus.PENDING:
        profit = 0.0

    return Bet(
        id=new_bet_id(),
        date=bet_date,
        match=_text(row, "Event", "Imported Event"),
        type=_text(row, "Type", "Unknown"),
        odds=odds,
        stake=stake,
        status=status,
        profit=profit,
    )


def read_spreadsheet(path: Union[str, Path]) -> pd.DataFrame:
    """Read the first sheet of an Excel workbook, or a CSV file."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path)
    return pd.read_excel(path, sheet_name=0, engine="openpyxl")


def import_bets(path: Union[str, Path], today: Optional[date] = None) -> ImportResult:
    """Read bets from a spreadsheet with the export column layout.

    Raises:
        BetImportError: if the file cannot be read or holds no usable rows.
    """
    try:
        df = read_spreadsheet(path)
    except Exception as e:
        raise BetImportError(f"Could not read {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]

    result = ImportResult()
    for row in df.to_dict(orient="records"):
        bet = row_to_bet(row, today=today)
        if bet is None:
            result.skipped += 1
        else:
            result.bets.append(bet)

    if not result.bets:
        raise BetImportError(f"No valid rows found in {path}")

    return result
