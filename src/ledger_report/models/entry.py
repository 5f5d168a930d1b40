"""Ledger entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """One ledger line.

    ``date`` is kept as the raw ``YYYY-MM-DD`` text: it is both the sort key
    and the input of the locale date formatter.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(strict=True)
    description: str = Field(strict=True)
    amount_cents: int = Field(strict=True)

    def sort_key(self) -> tuple[str, str, int]:
        return (self.date, self.description, self.amount_cents)
