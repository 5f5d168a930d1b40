"""Locale-aware date rendering for ledger entries."""
from __future__ import annotations
import re

from ..errors import MalformedDateError, UnknownLocaleError
from .catalog import resolve_locale

_DIGITS = re.compile(r'[0-9]+')

# Placeholder → (year, month, day) renderer
DATE_RENDERERS = {
    'MM/DD/YYYY': lambda y, m, d: f"{m:02d}/{d:02d}/{y}",
    'DD-MM-YYYY': lambda y, m, d: f"{d:02d}-{m:02d}-{y}",
}


def _parse_part(value: str, name: str, raw_date: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise MalformedDateError(raw_date, f"bad {name}: {raw_date}: {value!r} is not a number")
    return int(value)


def parse_entry_date(raw_date: str) -> tuple[int, int, int]:
    """Parse a ``YYYY-MM-DD`` entry date into ``(year, month, day)``.

    Only range bounds are checked: month in 1..12, day in 1..31. Calendar
    validity (``2023-02-30``) is not.
    """
    parts = raw_date.split('-')
    if len(parts) != 3:
        raise MalformedDateError(raw_date, f"bad date: {raw_date}")

    year = _parse_part(parts[0], "year", raw_date)
    month = _parse_part(parts[1], "month", raw_date)
    if not 1 <= month <= 12:
        raise MalformedDateError(raw_date, f"bad month: {raw_date}: {month}")
    day = _parse_part(parts[2], "day", raw_date)
    if not 1 <= day <= 31:
        raise MalformedDateError(raw_date, f"bad day: {raw_date}: {day}")

    return year, month, day


def format_date(raw_date: str, locale: str) -> str:
    """Render an entry date in the locale's date pattern."""
    profile = resolve_locale(locale)
    if profile is None:
        raise UnknownLocaleError(locale)
    year, month, day = parse_entry_date(raw_date)
    return DATE_RENDERERS[profile.date_format](year, month, day)
