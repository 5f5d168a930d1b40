"""Fixed-width row layout shared by the header and data rows."""
from __future__ import annotations

DATE_WIDTH = 10
DESCRIPTION_WIDTH = 25
DATA_AMOUNT_WIDTH = 13
ELLIPSIS = "..."
SEPARATOR = " | "


def truncate_description(description: str, width: int = DESCRIPTION_WIDTH) -> str:
    """Cut descriptions longer than *width* to exactly *width* characters, ending in ``...``."""
    if len(description) <= width:
        return description
    return description[:width - len(ELLIPSIS)] + ELLIPSIS


def format_row(date_text: str, description: str, amount_text: str, amount_width: int) -> str:
    """Lay out one report line, newline included.

    Date and description are left-justified, the amount is right-justified
    to *amount_width*. Only the description is ever cut.
    """
    description = truncate_description(description)
    return (
        f"{date_text:<{DATE_WIDTH}}{SEPARATOR}"
        f"{description:<{DESCRIPTION_WIDTH}}{SEPARATOR}"
        f"{amount_text:>{amount_width}}\n"
    )
