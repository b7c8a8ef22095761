"""Ledger exceptions."""


class LedgerError(Exception):
    """Base class for recoverable ledger errors."""


class LedgerValidationError(LedgerError):
    """Rejected user input. Nothing was written to the store."""


class BetImportError(LedgerError):
    """A spreadsheet could not be read or held no usable rows."""
