"""Locale-aware number rendering for ledger amounts."""
from __future__ import annotations

from ..models.locale import NumberFormat


def group_digits(digits: str, separator: str) -> str:
    """Insert *separator* every three digits, counting from the right.

    ``group_digits("1234567", ",")`` → ``"1,234,567"``
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_major_units(amount_cents: int, number_format: NumberFormat) -> str:
    """Render the absolute value of a cent amount in major units.

    Always two fraction digits; integer arithmetic keeps large amounts exact.
    - US: 123456789 → "1,234,567.89"
    - EU: 123456789 → "1.234.567,89"
    - Sign is dropped: -5 → "0.05"
    """
    major, minor = divmod(abs(amount_cents), 100)
    integer_part = group_digits(str(major), number_format.thousands_separator)
    return f"{integer_part}{number_format.decimal_separator}{minor:02d}"
