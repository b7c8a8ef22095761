"""SQLite key-value store for the bet ledger."""

import json
import sqlite3
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from config import get_settings
from betpro.models.schemas import Bet, Currency, Language, Theme


# Fixed keys of the local store
BETS_KEY = "betpro_bets"
LANGUAGE_KEY = "betpro_lang"
CURRENCY_KEY = "betpro_currency"
THEME_KEY = "betpro_theme"
USERS_KEY = "betpro_users"


class Database:
    """SQLite file holding the serialized bet list and display preferences."""

    def __init__(self, db_path: str = "data/betpro.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()

    # ===== Raw key-value access =====

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a stored value."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row[0] if row else default

    def set_value(self, key: str, value: str) -> None:
        """Set a stored value."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
            """, (key, value))
            conn.commit()

    def get_json(self, key: str, default=None):
        """Get a JSON value, or the default when absent or unreadable."""
        raw = self.get_value(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            print(f"Corrupt data under '{key}', ignoring it: {e}")
            return default

    def set_json(self, key: str, value) -> None:
        """Store a JSON-serializable value."""
        self.set_value(key, json.dumps(value, ensure_ascii=False))

    # ===== Bets =====

    def load_bets(self) -> list[Bet]:
        """Load the bet collection.

        Never raises on bad data: an unreadable collection loads as empty and
        malformed records are dropped. Pending records never carry profit.
        """
        records = self.get_json(BETS_KEY, default=[])
        if not isinstance(records, list):
            print(f"Expected a list under '{BETS_KEY}', got {type(records).__name__}")
            return []

        bets = []
        seen_ids = set()
        skipped = 0
        for record in records:
            try:
                bet = Bet.model_validate(record)
            except ValidationError:
                skipped += 1
                continue
            if bet.id in seen_ids:
                skipped += 1
                continue
            if not bet.status.is_resolved and bet.profit != 0:
                bet = bet.model_copy(update={"profit": 0.0})
            seen_ids.add(bet.id)
            bets.append(bet)

        if skipped:
            print(f"Skipped {skipped} unreadable bet record(s)")
        return bets

    def save_bets(self, bets: list[Bet]) -> None:
        """Replace the stored bet collection."""
        self.set_json(BETS_KEY, [bet.to_record() for bet in bets])

    # ===== Preferences =====

    def _get_choice(self, key: str, enum_cls, default):
        raw = self.get_value(key)
        try:
            return enum_cls(raw) if raw is not None else enum_cls(default)
        except ValueError:
            return enum_cls(default)

    def get_language(self) -> Language:
        """Selected display language."""
        return self._get_choice(LANGUAGE_KEY, Language, get_settings().default_language)

    def set_language(self, language: Union[Language, str]) -> None:
        self.set_value(LANGUAGE_KEY, Language(language).value)

    def get_currency(self) -> Currency:
        """Selected display currency."""
        return self._get_choice(CURRENCY_KEY, Currency, get_settings().default_currency)

    def set_currency(self, currency: Union[Currency, str]) -> None:
        self.set_value(CURRENCY_KEY, Currency(currency).value)

    def get_theme(self) -> Theme:
        """Selected theme."""
        return self._get_choice(THEME_KEY, Theme, get_settings().default_theme)

    def set_theme(self, theme: Union[Theme, str]) -> None:
        self.set_value(THEME_KEY, Theme(theme).value)


# Singleton instance
_db: Optional[Database] = None


def get_db(db_path: Optional[str] = None) -> Database:
    """Get database instance (singleton)."""
    global _db
    if _db is None:
        _db = Database(db_path or get_settings().db_path)
    return _db
