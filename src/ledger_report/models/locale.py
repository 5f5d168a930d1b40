"""Locale and currency profiles used by the report formatters.

Profiles are frozen so the catalogs built from them cannot drift at runtime.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SymbolPlacement(StrEnum):
    PREFIX = "prefix"                # $1,234.56
    PREFIX_SPACED = "prefix_spaced"  # € 1.234,56


class NegativeStyle(StrEnum):
    PARENTHESES = "parentheses"        # ($1.00)
    TRAILING_MINUS = "trailing_minus"  # € 1,00-


class NumberFormat(BaseModel):
    """Describes the number formatting convention of a locale."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = "."
    thousands_separator: str = ","
    example: str = "1,234.56"


class HeaderLabels(BaseModel):
    """Column titles of the report header row."""

    model_config = ConfigDict(frozen=True)

    date: str
    description: str
    change: str


class LocaleProfile(BaseModel):
    """Everything the formatters need to know about one locale."""

    model_config = ConfigDict(frozen=True)

    code: str
    headers: HeaderLabels
    date_format: str = "MM/DD/YYYY"
    number_format: NumberFormat = Field(default_factory=NumberFormat)
    symbol_placement: SymbolPlacement = SymbolPlacement.PREFIX
    negative_style: NegativeStyle = NegativeStyle.PARENTHESES


class CurrencyProfile(BaseModel):
    """Display data for one currency."""

    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str
