"""Test fixed-width row layout."""
from ledger_report.formatting.row import truncate_description, format_row, DATA_AMOUNT_WIDTH


class TestTruncateDescription:
    def test_short_unchanged(self):
        assert truncate_description("Coffee") == "Coffee"

    def test_exactly_25_unchanged(self):
        text = "x" * 25
        assert truncate_description(text) == text

    def test_26_truncated(self):
        result = truncate_description("x" * 26)
        assert result == "x" * 22 + "..."

    def test_long_truncated_to_25(self):
        result = truncate_description("Freude schoner Gotterfunken")
        assert result == "Freude schoner Gotterf..."
        assert len(result) == 25

    def test_counts_characters_not_bytes(self):
        text = "Überweisung für Miete und Nebenkosten"
        result = truncate_description(text)
        assert len(result) == 25
        assert result.endswith("...")


class TestFormatRow:
    def test_header(self):
        row = format_row("Date", "Description", "Change", len("Change"))
        assert row == "Date       | Description               | Change\n"

    def test_data_row(self):
        row = format_row("01/05/2023", "Coffee", "($3.50)", DATA_AMOUNT_WIDTH)
        assert row == "01/05/2023 | Coffee                    |       ($3.50)\n"

    def test_amount_column_width(self):
        row = format_row("01/05/2023", "Coffee", "$0.00 ", DATA_AMOUNT_WIDTH)
        assert len(row.rstrip("\n").split(" | ")[2]) == 13

    def test_long_amount_not_cut(self):
        amount = "($1,234,567,890.00)"
        row = format_row("01/05/2023", "Coffee", amount, DATA_AMOUNT_WIDTH)
        assert row.endswith(amount + "\n")

    def test_description_truncated_in_row(self):
        row = format_row("01/05/2023", "x" * 40, "$1.00 ", DATA_AMOUNT_WIDTH)
        assert " | " + "x" * 22 + "... | " in row
