"""Fixed locale and currency catalogs."""
from __future__ import annotations
from types import MappingProxyType

from ..models.locale import (
    CurrencyProfile, HeaderLabels, LocaleProfile, NegativeStyle, NumberFormat, SymbolPlacement,
)

LOCALES: MappingProxyType[str, LocaleProfile] = MappingProxyType({
    "en-US": LocaleProfile(
        code="en-US",
        headers=HeaderLabels(date="Date", description="Description", change="Change"),
        date_format="MM/DD/YYYY",
        number_format=NumberFormat(decimal_separator=".", thousands_separator=",", example="1,234.56"),
        symbol_placement=SymbolPlacement.PREFIX,
        negative_style=NegativeStyle.PARENTHESES,
    ),
    "nl-NL": LocaleProfile(
        code="nl-NL",
        headers=HeaderLabels(date="Datum", description="Omschrijving", change="Verandering"),
        date_format="DD-MM-YYYY",
        number_format=NumberFormat(decimal_separator=",", thousands_separator=".", example="1.234,56"),
        symbol_placement=SymbolPlacement.PREFIX_SPACED,
        negative_style=NegativeStyle.TRAILING_MINUS,
    ),
})

CURRENCIES: MappingProxyType[str, CurrencyProfile] = MappingProxyType({
    "USD": CurrencyProfile(code="USD", symbol="$"),
    "EUR": CurrencyProfile(code="EUR", symbol="€"),
})


def resolve_locale(code: str) -> LocaleProfile | None:
    """Look up a locale profile; ``None`` when the code is unsupported."""
    return LOCALES.get(code)


def resolve_currency(code: str) -> CurrencyProfile | None:
    """Look up a currency profile; ``None`` when the code is unsupported."""
    return CURRENCIES.get(code)


def supported_locales() -> list[str]:
    return sorted(LOCALES)


def supported_currencies() -> list[str]:
    return sorted(CURRENCIES)
