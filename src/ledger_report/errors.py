"""Errors raised while formatting a ledger report.

Every error aborts the whole report; callers never receive partial output.
All of them are ``ValueError`` subclasses so generic input-validation
handlers keep working.
"""

from __future__ import annotations

from typing import Any


class LedgerError(ValueError):
    """Base class for every ledger formatting failure."""


class UnknownCurrencyError(LedgerError):
    """Currency code is not in the supported catalog."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"bad currency: {currency}")


class UnknownLocaleError(LedgerError):
    """Locale code is not in the supported catalog."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"bad locale: {locale}")


class MalformedDateError(LedgerError):
    """Entry date is not a ``YYYY-MM-DD`` triple within range."""

    def __init__(self, date: str, message: str):
        self.date = date
        super().__init__(message)


class MalformedEntryError(LedgerError):
    """Entry is structurally invalid (missing field, wrong type)."""

    def __init__(self, entry: Any, message: str):
        self.entry = entry
        super().__init__(message)
