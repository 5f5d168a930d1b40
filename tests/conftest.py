"""Shared test fixtures."""
import pytest
from ledger_report.config import Settings
from ledger_report.ledger import LedgerFormatter
from tests.factories import make_entries


@pytest.fixture
def settings():
    return Settings(default_currency="EUR", default_locale="nl-NL", log_level="DEBUG")


@pytest.fixture
def formatter(settings):
    return LedgerFormatter(settings)


@pytest.fixture
def entries():
    return make_entries()
