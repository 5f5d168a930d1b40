"""Amount column rendering: currency symbol, grouping and negative notation."""
from __future__ import annotations

from ..errors import UnknownCurrencyError, UnknownLocaleError
from ..international.catalog import resolve_currency, resolve_locale
from ..international.number_formatting import format_major_units
from ..models.locale import NegativeStyle, SymbolPlacement


def format_change(amount_cents: int, locale: str, currency: str) -> str:
    """Render a signed cent amount for the amount column.

    Non-negative amounts get one trailing space so their digits line up with
    the closing parenthesis or trailing minus of negative ones.
    - en-US / USD: -350 → "($3.50)", 1234567 → "$12,345.67 "
    - nl-NL / EUR: -350 → "€ 3,50-", 1234567 → "€ 12.345,67 "
    """
    currency_profile = resolve_currency(currency)
    if currency_profile is None:
        raise UnknownCurrencyError(currency)
    profile = resolve_locale(locale)
    if profile is None:
        raise UnknownLocaleError(locale)

    number = format_major_units(amount_cents, profile.number_format)
    if profile.symbol_placement == SymbolPlacement.PREFIX_SPACED:
        text = f"{currency_profile.symbol} {number}"
    else:
        text = f"{currency_profile.symbol}{number}"

    if amount_cents >= 0:
        return text + " "
    if profile.negative_style == NegativeStyle.PARENTHESES:
        return f"({text})"
    return text + "-"
