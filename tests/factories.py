"""Test data factories for ledger entries."""
from __future__ import annotations

from ledger_report.models.entry import Entry


def make_entry(date: str = "2015-01-01", description: str = "Buy present", amount_cents: int = -1000) -> Entry:
    return Entry(date=date, description=description, amount_cents=amount_cents)


def make_entry_dict(date: str = "2015-01-01", description: str = "Buy present", amount_cents: int = -1000) -> dict:
    return {"date": date, "description": description, "amount_cents": amount_cents}


def make_entries() -> list[Entry]:
    """Three entries deliberately out of order."""
    return [
        make_entry("2015-01-02", "Get present", 1000),
        make_entry("2015-01-01", "Buy present", -1000),
        make_entry("2015-01-01", "Buy present", -2000),
    ]
