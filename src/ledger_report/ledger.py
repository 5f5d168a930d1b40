"""Render ledger entries as an aligned, locale-aware text report."""
from __future__ import annotations
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from .config import Settings
from .errors import LedgerError, MalformedEntryError, UnknownCurrencyError, UnknownLocaleError
from .formatting.amount import format_change
from .formatting.row import DATA_AMOUNT_WIDTH, format_row
from .international.catalog import resolve_currency, resolve_locale
from .international.date_formatting import format_date
from .models.entry import Entry
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _to_entry(item: Entry | Mapping[str, Any]) -> Entry:
    if isinstance(item, Entry):
        return item
    try:
        return Entry.model_validate(item)
    except ValidationError as e:
        first = e.errors()[0]["msg"]
        raise MalformedEntryError(item, f"bad entry: {e.error_count()} validation error(s): "
                                        f"{first}") from e


def _sorted_copy(entries: Iterable[Entry | Mapping[str, Any]]) -> list[Entry]:
    """Fresh list of entries ordered by (date, description, amount_cents).

    The caller's collection is only read.
    """
    return sorted((_to_entry(item) for item in entries), key=Entry.sort_key)


def format_ledger(currency: str, locale: str, entries: Iterable[Entry | Mapping[str, Any]]) -> str:
    """Render *entries* as an aligned text report.

    Currency is checked before locale, and both before any entry is read.
    Raises a ``LedgerError`` subclass on the first problem; no partial report
    is ever returned.
    """
    if resolve_currency(currency) is None:
        raise UnknownCurrencyError(currency)
    profile = resolve_locale(locale)
    if profile is None:
        raise UnknownLocaleError(locale)

    rows: list[str] = []
    for entry in _sorted_copy(entries):
        rows.append(format_row(
            format_date(entry.date, locale),
            entry.description,
            format_change(entry.amount_cents, locale, currency),
            DATA_AMOUNT_WIDTH,
        ))

    headers = profile.headers
    # Header amount column is only as wide as its own label
    header = format_row(headers.date, headers.description, headers.change, len(headers.change))
    return header + "".join(rows)


class LedgerFormatter:
    """Formats ledger reports, falling back to configured default codes."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def configure_logging(self, stream=None):
        """Set up structlog at this formatter's configured ``log_level``."""
        setup_logging(self.settings, stream=stream)

    def format(
        self,
        entries: Iterable[Entry | Mapping[str, Any]],
        currency: str | None = None,
        locale: str | None = None,
    ) -> str:
        currency = currency if currency is not None else self.settings.default_currency
        locale = locale if locale is not None else self.settings.default_locale
        entries = list(entries)
        try:
            report = format_ledger(currency, locale, entries)
        except LedgerError as e:
            logger.warning("ledger_format_failed", error_type=type(e).__name__, error=str(e),
                           currency=currency, locale=locale)
            raise
        logger.debug("ledger_formatted", currency=currency, locale=locale,
                     rows=len(entries))
        return report
