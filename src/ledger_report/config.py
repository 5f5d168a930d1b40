"""Application configuration via environment variables with LEDGER_ prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ledger report configuration.

    All settings are read from environment variables prefixed with ``LEDGER_``.
    Defaults are not checked against the locale/currency catalogs here; an
    unsupported value fails when a report is formatted.
    """

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    # ── Report defaults ───────────────────────────────────────────────────
    # Used by LedgerFormatter.format when the caller passes no code
    default_currency: str = "USD"
    default_locale: str = "en-US"

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"
