"""BetPro - personal sports betting ledger."""

__version__ = "0.1.0"
