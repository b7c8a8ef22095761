"""Local persistence for bets and preferences."""

from .database import Database, get_db

__all__ = ["Database", "get_db"]
