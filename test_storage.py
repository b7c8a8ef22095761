"""Tests for the local store, spreadsheet import/export, users and labels."""

import json
import tempfile
from datetime import date
from pathlib import Path

import pytest

from betpro.auth import UserRegistry
from betpro.db import Database
from betpro.db.database import BETS_KEY, LANGUAGE_KEY
from betpro.errors import BetImportError, LedgerValidationError
from betpro.i18n import format_money, month_label, translate
from betpro.ledger import BetStore, build_draft
from betpro.models.schemas import BetStatus, Currency, Language, Theme
from betpro.utils import export_bets, import_bets
from config import get_settings


def fresh_db(tmp: str) -> Database:
    return Database(str(Path(tmp) / "data" / "betpro.db"))


def seeded_store(db: Database) -> BetStore:
    store = BetStore(db)
    store.add(build_draft("2024-03-05", "Single", "10", ["Flamengo x Palmeiras"], ["2.5"]), status=BetStatus.WIN)
    store.add(build_draft("2024-03-06", "", "5", ["A x B", "C x D"], ["2.0", "1.5"]), status=BetStatus.LOSS)
    store.add(build_draft("2024-03-07", "Single", "8", ["Santos x Vasco"], ["1.9"]))
    return store


# ===== Local store =====

def test_missing_bets_load_empty():
    with tempfile.TemporaryDirectory() as tmp:
        assert fresh_db(tmp).load_bets() == []


def test_corrupt_bets_load_empty():
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        db.set_value(BETS_KEY, "{not json")
        assert db.load_bets() == []

        db.set_value(BETS_KEY, json.dumps({"id": "x"}))
        assert db.load_bets() == []


def test_malformed_records_are_skipped():
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        good = {"id": "a1", "date": "2024-03-05", "match": "A x B", "type": "Single",
                "odds": 2.0, "stake": 10, "status": "WIN", "profit": 10}
        db.set_json(BETS_KEY, [
            good,
            {"id": "b2", "date": "yesterday"},
            dict(good, status="MAYBE"),
            dict(good),  # duplicate id
        ])

        bets = db.load_bets()
        assert len(bets) == 1
        assert bets[0].id == "a1"
        assert bets[0].date == date(2024, 3, 5)


def test_pending_records_load_without_profit():
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        db.set_json(BETS_KEY, [
            {"id": "p1", "date": "2024-03-05", "match": "A x B", "type": "Single",
             "odds": 2.0, "stake": 10, "status": "PENDING", "profit": 25},
            {"id": "w1", "date": "2024-03-05", "match": "C x D", "type": "Single",
             "odds": 2.0, "stake": 10, "status": "WIN", "profit": 7.5},
        ])

        pending, win = db.load_bets()
        assert pending.profit == 0
        assert win.profit == 7.5  # cashout values survive a reload


def test_persisted_shape_uses_original_keys():
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        seeded_store(db)
        records = db.get_json(BETS_KEY)

        combo = records[1]
        assert combo["date"] == "2024-03-06"
        assert combo["status"] == "LOSS"
        assert combo["subGames"] == [{"event": "A x B", "odd": 2.0}, {"event": "C x D", "odd": 1.5}]
        assert "subGames" not in records[0]


def test_preferences_fall_back_to_defaults():
    settings = get_settings()
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        assert db.get_language() == Language(settings.default_language)
        assert db.get_currency() == Currency(settings.default_currency)
        assert db.get_theme() == Theme(settings.default_theme)

        db.set_language("en")
        db.set_currency(Currency.EUR)
        db.set_theme("dark")
        assert db.get_language() == Language.EN
        assert db.get_currency() == Currency.EUR
        assert db.get_theme() == Theme.DARK

        db.set_value(LANGUAGE_KEY, "klingon")
        assert db.get_language() == Language(settings.default_language)


# ===== Import / export =====

def test_export_csv_columns():
    with tempfile.TemporaryDirectory() as tmp:
        store = seeded_store(fresh_db(tmp))
        path = export_bets(store.list_bets(), output_dir=str(Path(tmp) / "out"), fmt="csv")

        assert path.name.startswith("betpro_export_")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Date,Event,Type,Odds,Stake,Status,Profit"
        assert len(lines) == 4
        assert "Multiple (2)" in lines[2]


def test_export_then_import_xlsx():
    with tempfile.TemporaryDirectory() as tmp:
        store = seeded_store(fresh_db(tmp))
        path = export_bets(store.list_bets(), output_dir=str(Path(tmp) / "out"), fmt="xlsx")

        result = import_bets(path)
        assert len(result.bets) == 3
        assert result.skipped == 0

        by_match = {b.match: b for b in result.bets}
        assert by_match["Flamengo x Palmeiras"].profit == 15.0
        assert by_match["Multiple (2)"].odds == 3.0
        assert by_match["Santos x Vasco"].status == BetStatus.PENDING
        # Fresh ids on import
        original_ids = {b.id for b in store.list_bets()}
        assert not original_ids & {b.id for b in result.bets}


def test_import_defaults_for_blank_cells():
    """Missing odds/stake/status fall back to 1 / 0 / pending."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bets.csv"
        path.write_text(
            "Date,Event,Type,Odds,Stake,Status,Profit\n"
            "2024-03-05,Team A v Team B,Single,,,,\n"
            "2024-03-06,,,abc,12,maybe,40\n"
            ",Undated,Single,2.0,10,win,10\n",
            encoding="utf-8",
        )

        result = import_bets(path, today=date(2024, 6, 1))
        first, second, third = result.bets

        assert first.odds == 1
        assert first.stake == 0
        assert first.status == BetStatus.PENDING
        assert first.profit == 0
        assert first.date == date(2024, 3, 5)

        assert second.match == "Imported Event"
        assert second.type == "Unknown"
        assert second.odds == 1
        assert second.status == BetStatus.PENDING
        assert second.profit == 0  # pending never carries profit

        assert third.date == date(2024, 6, 1)
        assert third.status == BetStatus.WIN
        assert third.profit == 10


def test_import_skips_bad_dates_and_rejects_empty_files():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bets.csv"
        path.write_text(
            "Date,Event,Odds,Stake\n"
            "soon,A x B,2.0,10\n"
            "2024-03-05,C x D,2.0,10\n",
            encoding="utf-8",
        )
        result = import_bets(path)
        assert len(result.bets) == 1
        assert result.skipped == 1

        empty = Path(tmp) / "empty.csv"
        empty.write_text("Date,Event,Type,Odds,Stake,Status,Profit\n", encoding="utf-8")
        with pytest.raises(BetImportError):
            import_bets(empty)

        with pytest.raises(BetImportError):
            import_bets(Path(tmp) / "missing.xlsx")


def test_imported_bets_are_prepended():
    with tempfile.TemporaryDirectory() as tmp:
        db = fresh_db(tmp)
        store = seeded_store(db)
        path = Path(tmp) / "bets.csv"
        path.write_text("Date,Event,Odds,Stake,Status,Profit\n2024-01-01,New,2,10,LOSS,-10\n", encoding="utf-8")

        store.import_bets(import_bets(path).bets)
        reloaded = BetStore(db).load().list_bets()
        assert len(reloaded) == 4
        assert reloaded[0].match == "New"
        assert reloaded[0].profit == -10


# ===== Users =====

def test_register_and_login():
    with tempfile.TemporaryDirectory() as tmp:
        registry = UserRegistry(fresh_db(tmp))
        user = registry.register("Ana@Example.com", "Ana", "s3cret")
        assert user.email == "ana@example.com"

        assert registry.login("ana@example.com", "s3cret").name == "Ana"
        assert registry.login("ana@example.com", "wrong") is None
        assert registry.login("bob@example.com", "s3cret") is None

        with pytest.raises(LedgerValidationError):
            registry.register("ana@example.com", "Other", "pw")
        with pytest.raises(LedgerValidationError):
            registry.register("", "Nobody", "pw")


# ===== Labels =====

def test_month_labels_and_translations():
    assert month_label(Language.EN, 1) == "Jan"
    assert month_label("de", 3) == "März"
    assert month_label(Language.AR, 12) == "ديسمبر"
    with pytest.raises(ValueError):
        month_label(Language.EN, 0)

    assert translate(Language.PT, "multiple") == "Múltipla"
    assert translate("en", "multiple") == "Multiple"


def test_format_money():
    assert format_money(15, Currency.BRL) == "R$ 15.00"
    assert format_money(-20, "USD") == "-$ 20.00"
    assert format_money(1234.5, Currency.EUR) == "€ 1,234.50"


if __name__ == "__main__":
    print("=" * 50)
    print("BetPro Storage Test Suite")
    print("=" * 50)

    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            func()
            print(f"[OK] {name}")

    print("\n" + "=" * 50)
    print("All tests PASSED!")
    print("=" * 50)
